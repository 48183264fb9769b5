import re
from typing import List

# 字母/数字连续串，允许词内的撇号和连字符：don't / well-known
_TOKEN_RE = re.compile(r"[^\W_]+(?:['\-][^\W_]+)*")
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


def tokenize(text: str) -> List[str]:
    """
    切分为可比较的小写词：
      - 大小写折叠
      - 弯引号统一为直撇号
      - 其余标点全部丢弃（表情符号不算 token）
    """
    if not text:
        return []
    normalized = text.casefold().translate(_APOSTROPHES)
    return _TOKEN_RE.findall(normalized)
