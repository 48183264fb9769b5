# -*- coding: utf-8 -*-
# web/backend/main.py

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.common.log_utils import init_logger
from src.config.settings import CONFIG, LOG_DIR
from src.nlp.errors import InternalClassificationError, MissingInputError
from web.backend.api.v1.schemas import HealthResponse
from web.backend.api.v1.sentiment import router as sentiment_router
from web.backend.api.v1.services import get_sentiment_service

WEB_CONFIG = CONFIG.get("WEB", {})

NO_TEXT_MESSAGE = "No text provided"
INVALID_BODY_MESSAGE = "Invalid request body"
INTERNAL_ERROR_MESSAGE = "Internal classification error"

logger = init_logger(
    name="api",
    module_name=__name__,
    log_dir=os.path.join(LOG_DIR, "web"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时加载词典，词典文件有误则直接启动失败
    get_sentiment_service()
    logger.info("[API] 服务启动完成")
    yield


app = FastAPI(
    title="Circle Chat Sentiment Service",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS（移动端直接调用）
app.add_middleware(
    CORSMiddleware,
    allow_origins=WEB_CONFIG.get("allow_origins", ["*"]),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sentiment_router, tags=["Sentiment"])


@app.exception_handler(MissingInputError)
def missing_input_handler(request: Request, exc: MissingInputError):
    logger.warning(f"[API] {request.url.path} 缺少文本")
    return JSONResponse(status_code=400, content={"error": NO_TEXT_MESSAGE})


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"[API] {request.url.path} 请求体不合法: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


@app.exception_handler(InternalClassificationError)
def classification_error_handler(request: Request, exc: InternalClassificationError):
    logger.error(f"[API] {request.url.path} 打分失败: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"[API] {request.url.path} 未知错误: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=WEB_CONFIG.get("host", "0.0.0.0"),
        port=WEB_CONFIG.get("port", 5000),
        log_config=None,
    )
