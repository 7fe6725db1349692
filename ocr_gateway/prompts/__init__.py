"""
Prompts module.

이 패키지는 OCR 제공자 호출에 사용되는 LLM 프롬프트를 중앙 관리합니다.
"""

from .vision_ocr import VISION_OCR_PROMPT

__all__ = [
    # Vision OCR
    "VISION_OCR_PROMPT",
]
