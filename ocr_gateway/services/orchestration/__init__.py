"""오케스트레이션 레이어

언어 플래그 기반 OCR 제공자 라우팅을 담당합니다.
"""

from .models import Language
from .router import OCRRouter

__all__ = [
    "Language",
    "OCRRouter",
]
