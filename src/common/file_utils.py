import hashlib
import json
import os
from typing import Dict, Iterable, Tuple, Union

import pandas as pd

Weight = Union[int, float]

WORD_COLUMN = "word"
WEIGHT_COLUMN = "weight"


def read_weight_table(path: str) -> pd.DataFrame:
    """
    读取 词-权重 两列表格：
      - .tsv / .txt => 制表符分隔（AFINN 格式，无表头）
      - .csv        => 逗号分隔（无表头）
      - .json       => {"word": weight, ...}
    """
    if not os.path.exists(path):
        raise ValueError(f"词典文件不存在: {path}")

    filename = path.lower()
    if filename.endswith(".json"):
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("JSON 词典必须是 {word: weight} 对象")
        df = pd.DataFrame(list(data.items()), columns=[WORD_COLUMN, WEIGHT_COLUMN])
    elif filename.endswith(".tsv") or filename.endswith(".txt"):
        df = pd.read_csv(
            path,
            sep="\t",
            header=None,
            usecols=[0, 1],
            names=[WORD_COLUMN, WEIGHT_COLUMN],
            dtype={WORD_COLUMN: str},
            keep_default_na=False,
            quoting=3,
            encoding="utf-8",
        )
    elif filename.endswith(".csv"):
        df = pd.read_csv(
            path,
            header=None,
            usecols=[0, 1],
            names=[WORD_COLUMN, WEIGHT_COLUMN],
            dtype={WORD_COLUMN: str},
            keep_default_na=False,
            encoding="utf-8",
        )
    else:
        raise ValueError("不支持的词典格式，只支持 TSV/TXT/CSV/JSON")

    return df


def table_to_weights(df: pd.DataFrame) -> Dict[str, Weight]:
    words = df[WORD_COLUMN].astype(str).str.strip()
    if (words == "").any():
        row = int(words[words == ""].index[0])
        raise ValueError(f"第 {row + 1} 行缺少词条")

    weights = pd.to_numeric(df[WEIGHT_COLUMN], errors="coerce")
    if weights.isna().any():
        row = int(weights[weights.isna()].index[0])
        raise ValueError(f"第 {row + 1} 行权重不是数字: {df[WEIGHT_COLUMN].iloc[row]!r}")

    result: Dict[str, Weight] = {}
    for word, weight in zip(words, weights):
        weight = float(weight)
        # 整数权重保持 int，AFINN 词典的得分仍是整数
        result[word] = int(weight) if weight.is_integer() else weight
    return result


def generate_hash(items: Iterable[Tuple[str, Weight]]) -> str:
    joined = "\n".join(f"{word}\t{weight!r}" for word, weight in sorted(items))
    return hashlib.md5(joined.encode("utf-8")).hexdigest()
