"""
基于词典的情感打分：

  1. 缺失或空字符串直接拒绝（MissingInputError），不会当作 neutral；
     纯空白文本照常打分（无 token => neutral）
  2. tokenize 后逐词查词典，未收录的词权重为 0
  3. 前一个词是否定词时翻转权重符号（not good => -good）
  4. 求和得到 score，按符号给出 positive / negative / neutral

纯函数：不做 I/O，不修改词典，同样的输入和词典版本结果完全一致。
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from vaderSentiment.vaderSentiment import NEGATE

from src.nlp.errors import InternalClassificationError, MissingInputError
from src.nlp.lexicon import Lexicon
from src.nlp.tokenizer import tokenize

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

DEFAULT_NEGATORS = frozenset(NEGATE)
DEFAULT_MODERATION_THRESHOLD = -3


def label_for_score(score) -> str:
    if score > 0:
        return POSITIVE
    if score < 0:
        return NEGATIVE
    return NEUTRAL


@dataclass(frozen=True)
class SentimentResult:
    text: str
    score: Union[int, float]
    overall: str

    def to_dict(self) -> dict:
        return {"text": self.text, "score": self.score, "overall": self.overall}


@dataclass(frozen=True)
class SentimentAnalysis:
    """单条文本的完整打分明细"""

    text: str
    score: Union[int, float]
    overall: str
    comparative: float
    tokens: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)
    negated: List[str] = field(default_factory=list)
    calculation: List[Tuple[str, Union[int, float]]] = field(default_factory=list)
    lexicon_version: str = ""

    def to_result(self) -> SentimentResult:
        return SentimentResult(text=self.text, score=self.score, overall=self.overall)


class SentimentClassifier:
    def __init__(
        self,
        lexicon: Lexicon,
        negators: Optional[Iterable[str]] = None,
        negation: bool = True,
        precision: int = 4,
    ):
        self.lexicon = lexicon
        self.negators = frozenset(
            n.casefold() for n in (DEFAULT_NEGATORS if negators is None else negators)
        )
        self.negation = negation
        self.precision = precision

    def _round(self, score):
        if isinstance(score, int):
            return score
        score = round(score, self.precision)
        # 避免 -0.0
        return score if score else 0.0

    def analyze(self, text: Optional[str]) -> SentimentAnalysis:
        if text is None or text == "":
            raise MissingInputError()
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        try:
            tokens = tokenize(text)
            words, positive, negative, negated = [], [], [], []
            calculation = []
            total = 0

            previous = None
            for token in tokens:
                weight = self.lexicon.get(token, 0)
                if weight:
                    if self.negation and previous in self.negators:
                        weight = -weight
                        negated.append(token)
                    words.append(token)
                    calculation.append((token, weight))
                    (positive if weight > 0 else negative).append(token)
                    total += weight
                previous = token

            score = self._round(total)
            comparative = score / len(tokens) if tokens else 0.0
        except Exception as e:
            raise InternalClassificationError(f"情感打分失败: {e}") from e

        return SentimentAnalysis(
            text=text,
            score=score,
            overall=label_for_score(score),
            comparative=comparative,
            tokens=tokens,
            words=words,
            positive=positive,
            negative=negative,
            negated=negated,
            calculation=calculation,
            lexicon_version=self.lexicon.version,
        )

    def classify(self, text: Optional[str]) -> SentimentResult:
        return self.analyze(text).to_result()

    def analyze_batch(self, texts: List[str]) -> List[SentimentAnalysis]:
        return [self.analyze(text) for text in texts]

    def is_flagged(
        self,
        text_or_result: Union[str, SentimentResult, SentimentAnalysis],
        threshold: Union[int, float] = DEFAULT_MODERATION_THRESHOLD,
    ) -> bool:
        """聊天消息审核：score 低于阈值则视为不当内容"""
        if isinstance(text_or_result, (SentimentResult, SentimentAnalysis)):
            score = text_or_result.score
        else:
            score = self.analyze(text_or_result).score
        return score < threshold


if __name__ == "__main__":
    from src.nlp.lexicon import load_default_lexicon

    clf = SentimentClassifier(load_default_lexicon())
    for sample in (
        "I love this, it's great and wonderful",
        "This is terrible and awful, I hate it",
        "The meeting is at 3pm in room 204",
        "this is not good",
    ):
        print(clf.classify(sample).to_dict())
