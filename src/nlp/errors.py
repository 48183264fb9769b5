class SentimentError(Exception):
    """情感分析相关异常基类"""


class MissingInputError(SentimentError):
    """输入文本缺失或为空"""

    def __init__(self, message: str = "No text provided"):
        super().__init__(message)
        self.message = message


class InternalClassificationError(SentimentError):
    """打分过程中的意外错误"""


class LexiconLoadError(SentimentError):
    """词典文件不存在或格式错误"""
