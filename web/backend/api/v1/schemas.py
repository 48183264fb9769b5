from typing import Literal, Optional, Union

from pydantic import BaseModel, StrictStr, field_validator


# ------------------------------------------------------
# 通用
# ------------------------------------------------------
class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"


# ------------------------------------------------------
# sentiment
# ------------------------------------------------------
class SentimentRequest(BaseModel):
    # 缺失/空字符串由接口层返回 400，而不是 422
    text: Optional[StrictStr] = None

    @field_validator("text", mode="before")
    @classmethod
    def falsy_as_missing(cls, v):
        # 0 / false 与缺失同等处理，返回 "No text provided"
        if isinstance(v, (bool, int, float)) and not v:
            return None
        return v


class SentimentResponse(BaseModel):
    text: str
    score: Union[int, float]
    overall: Literal["positive", "negative", "neutral"]
