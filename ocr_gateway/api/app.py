"""
OCR 게이트웨이 HTTP 앱

- POST /api/ocr : {imageData, lang} → {text}, 실패 시 평문 오류 본문과 비-200 상태
- GET  /health  : 상태 확인
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from ocr_gateway.models.api import OCRRequest, OCRResponse
from ocr_gateway.services.ocr.exceptions import OCRError
from ocr_gateway.services.orchestration import OCRRouter
from ocr_gateway.settings import settings

logger = logging.getLogger(__name__)

SERVER_NAME = "ocr-gateway"


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "server": SERVER_NAME})


async def recognize(request: Request):
    """이미지 OCR 요청 처리 (언어별 제공자로 디스패치)"""
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("OCR 요청 본문이 JSON이 아닙니다.")
        return PlainTextResponse("Invalid JSON body", status_code=400)

    try:
        body = OCRRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"잘못된 OCR 요청: {e.error_count()}개 오류")
        return PlainTextResponse("Invalid OCR request", status_code=400)

    router: OCRRouter = request.app.state.ocr_router
    logger.info(f"🖼️ OCR 요청: lang={body.lang}, size={len(body.image_data)}")

    try:
        text = await run_in_threadpool(router.recognize, body.image_data, body.lang)
    except OCRError as e:
        logger.error(f"OCR 실패: lang={body.lang}, status={e.status_code}, message={e.message}")
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception:
        logger.exception("OCR 처리 중 예기치 못한 오류")
        return PlainTextResponse("Internal server error", status_code=500)

    return JSONResponse(OCRResponse(text=text).model_dump())


def create_app(ocr_router: OCRRouter | None = None) -> Starlette:
    """Starlette 앱 생성

    Args:
        ocr_router: 사용할 OCRRouter (None이면 설정 기반 기본 라우터)

    Returns:
        Starlette 앱
    """
    router = ocr_router or OCRRouter()

    @asynccontextmanager
    async def lifespan(_app: Starlette):
        yield
        router.close()

    middleware = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_methods=["POST", "GET"],
                allow_headers=["*"],
            )
        )

    routes = [
        Route("/health", endpoint=health, methods=["GET"]),
        Route("/api/ocr", endpoint=recognize, methods=["POST"]),
    ]

    app = Starlette(debug=settings.app_debug, routes=routes, middleware=middleware, lifespan=lifespan)
    app.state.ocr_router = router
    return app
