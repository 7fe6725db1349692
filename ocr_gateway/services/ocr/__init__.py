"""OCR 서비스 패키지

언어별 외부 OCR 제공자를 통일된 인터페이스로 제공합니다.
모든 서비스가 OCRResultEnvelope를 반환합니다.

주요 모듈:
- base: OCR 서비스 기본 인터페이스 (BaseOCRService)
- naver_ocr: NAVER CLOVA OCR 구현체 (NaverClovaOCR, 한국어)
- vision_ocr: OpenAI Vision 구현체 (OpenAIVisionOCR, 영어/손글씨)
- dummy_ocr: 테스트용 더미 구현체 (DummyOCR)
- exceptions: OCRError 계열 예외
- factory: OCR 서비스 팩토리 함수
"""

from .base import BaseOCRService
from .dummy_ocr import DummyOCR
from .exceptions import OCRError, OCRNotConfiguredError, OCRProviderError
from .naver_ocr import NaverClovaOCR
from .vision_ocr import OpenAIVisionOCR
from .factory import get_ocr_service

__all__ = [
    # 기본 인터페이스
    "BaseOCRService",
    # 서비스
    "NaverClovaOCR",
    "OpenAIVisionOCR",
    "DummyOCR",
    # 예외
    "OCRError",
    "OCRNotConfiguredError",
    "OCRProviderError",
    # 팩토리
    "get_ocr_service",
]
