import os
from typing import Optional

from src.common.log_utils import init_logger
from src.config.settings import CONFIG, LOG_DIR
from src.nlp.lexicon import Lexicon, build_lexicon
from src.nlp.sentiment import (
    DEFAULT_MODERATION_THRESHOLD,
    SentimentAnalysis,
    SentimentClassifier,
)


class SentimentModelService:
    def __init__(self, lexicon: Optional[Lexicon] = None, config: Optional[dict] = None):
        self.logger = init_logger(
            name="service",
            module_name=__name__,
            log_dir=os.path.join(LOG_DIR, "web"),
        )
        self.config = config if config is not None else CONFIG.get("SENTIMENT", {})
        self.moderation_threshold = self.config.get(
            "moderation_threshold", DEFAULT_MODERATION_THRESHOLD
        )
        self._load_model(lexicon)
        self.logger.info("[Service] 服务初始化完成")

    def _load_model(self, lexicon: Optional[Lexicon]):
        self.logger.info("[Service] 加载情感词典")
        if lexicon is None:
            lexicon = build_lexicon(self.config.get("lexicon_path") or None)
        self.lexicon = lexicon
        self.logger.info(
            f"[Service] 词典加载完成 source={lexicon.source} "
            f"size={len(lexicon)} version={lexicon.version}"
        )
        self.classifier = SentimentClassifier(
            lexicon,
            negation=self.config.get("negation", True),
            precision=self.config.get("precision", 4),
        )

    def analyze_text(self, text: Optional[str]) -> SentimentAnalysis:
        analysis = self.classifier.analyze(text)
        self.logger.debug(
            f"[Service] score={analysis.score} overall={analysis.overall} "
            f"matched={len(analysis.words)}/{len(analysis.tokens)}"
        )
        if self.classifier.is_flagged(analysis, self.moderation_threshold):
            self.logger.info(f"[Service] 消息低于审核阈值 score={analysis.score}")
        return analysis


_service: Optional[SentimentModelService] = None


def get_sentiment_service() -> SentimentModelService:
    """进程内只加载一次词典"""
    global _service
    if _service is None:
        _service = SentimentModelService()
    return _service
