# web/backend/api/v1/sentiment.py
from typing import Optional

from fastapi import APIRouter, Depends

from src.nlp.errors import InternalClassificationError, SentimentError
from web.backend.api.v1.schemas import ErrorResponse, SentimentRequest, SentimentResponse
from web.backend.api.v1.services import SentimentModelService, get_sentiment_service

router = APIRouter()


@router.post(
    "/analyze",
    response_model=SentimentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze_sentiment(
    payload: Optional[SentimentRequest] = None,
    service: SentimentModelService = Depends(get_sentiment_service),
):
    text = payload.text if payload is not None else None
    try:
        result = service.analyze_text(text).to_result()
    except SentimentError:
        # 状态码映射交给 main.py 的异常处理器
        raise
    except Exception as e:
        raise InternalClassificationError(str(e)) from e

    return SentimentResponse(text=result.text, score=result.score, overall=result.overall)
