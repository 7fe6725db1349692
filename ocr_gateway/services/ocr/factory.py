"""OCR 서비스 팩토리"""

from ocr_gateway.settings import settings

from .base import BaseOCRService
from .dummy_ocr import DummyOCR
from .naver_ocr import NaverClovaOCR
from .vision_ocr import OpenAIVisionOCR


def get_ocr_service(lang: str) -> BaseOCRService:
    """언어와 설정에 따라 적절한 OCR 서비스 반환

    - en: OpenAI Vision (LLM 제공자는 settings.llm_provider)
    - ko: settings.ocr_provider (naver | dummy)

    Args:
        lang: 인식 언어 ('ko' | 'en')

    Returns:
        BaseOCRService 인스턴스 (모두 OCRResultEnvelope 반환)
    """
    if lang == "en":
        return OpenAIVisionOCR()
    elif lang == "ko":
        if settings.ocr_provider == "naver":
            return NaverClovaOCR()
        elif settings.ocr_provider == "dummy":
            return DummyOCR(lang="ko")
        else:
            raise ValueError(f"지원하지 않는 OCR 제공자: {settings.ocr_provider}")
    else:
        raise ValueError(f"지원하지 않는 언어: {lang}")
