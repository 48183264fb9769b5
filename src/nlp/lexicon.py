"""
情感词典：词 -> 极性权重 的只读映射

  - 默认使用 vaderSentiment 自带的 VADER 词典（浮点权重，约 [-4, 4]）
  - 可通过 LEXICON_PATH 指定本地词典文件（AFINN 格式等）
  - 词典加载后不可变，多个请求线程共享同一份
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from src.common.file_utils import Weight, generate_hash, read_weight_table, table_to_weights
from src.nlp.errors import LexiconLoadError

DEFAULT_SOURCE = "vader"


class Lexicon(Mapping):
    def __init__(self, weights: Mapping, source: str = "memory"):
        entries: Dict[str, Weight] = {}
        for word, weight in weights.items():
            entries[str(word).casefold()] = weight
        self._entries = MappingProxyType(entries)
        self.source = source
        self.version = generate_hash(entries.items())

    def __getitem__(self, word: str) -> Weight:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, word: str, default: Weight = 0) -> Weight:
        return self._entries.get(word, default)

    def with_overrides(self, overrides: Optional[Mapping]) -> "Lexicon":
        """返回新增/覆盖部分词条后的新词典，原词典不变"""
        if not overrides:
            return self
        merged = dict(self._entries)
        merged.update({str(k).casefold(): v for k, v in overrides.items()})
        return Lexicon(merged, source=f"{self.source}+overrides")

    def __repr__(self) -> str:
        return f"Lexicon(source={self.source!r}, size={len(self)}, version={self.version[:8]})"


def load_default_lexicon() -> Lexicon:
    analyzer = SentimentIntensityAnalyzer()
    return Lexicon(analyzer.lexicon, source=DEFAULT_SOURCE)


def load_lexicon(path: str) -> Lexicon:
    try:
        weights = table_to_weights(read_weight_table(path))
    except (ValueError, OSError) as e:
        raise LexiconLoadError(f"词典加载失败 {path}: {e}") from e
    if not weights:
        raise LexiconLoadError(f"词典为空: {path}")
    return Lexicon(weights, source=path)


def build_lexicon(path: Optional[str] = None, overrides: Optional[Mapping] = None) -> Lexicon:
    lexicon = load_lexicon(path) if path else load_default_lexicon()
    return lexicon.with_overrides(overrides)
