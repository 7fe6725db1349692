"""
OCR 게이트웨이 서버 실행 진입점

    $ ocr-gateway            # 또는 python -m ocr_gateway.server
"""

import logging

import uvicorn

from ocr_gateway.api.app import create_app
from ocr_gateway.runtime import setup_logging
from ocr_gateway.settings import settings, validate_settings


def main() -> None:
    setup_logging()
    logger = logging.getLogger("ocr_gateway.server")

    for area, message in validate_settings().items():
        logger.warning(f"[{area}] {message}")

    logger.info("🚀 OCR 게이트웨이 서버 시작 중...")
    logger.info(f"🌐 서버 주소: http://{settings.host}:{settings.port} (OCR: /api/ocr, Health: /health)")
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
