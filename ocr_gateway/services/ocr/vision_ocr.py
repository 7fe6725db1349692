"""OpenAI Vision 기반 OCR 서비스

영어/손글씨 이미지를 멀티모달 채팅 모델로 읽습니다.
이미지를 data URL 그대로 고정 지시문과 함께 보내고,
max_tokens로 응답 길이를 제한합니다.
"""
from __future__ import annotations

import logging

from openai import OpenAIError

from ocr_gateway.models.envelopes import OCRItem, OCRResultEnvelope
from ocr_gateway.prompts import VISION_OCR_PROMPT
from ocr_gateway.services.llm.base import BaseLLMService, LLMConfigurationError
from ocr_gateway.services.llm.factory import get_llm_service
from ocr_gateway.settings import settings
from ocr_gateway.utils.images import to_image_url

from .base import BaseOCRService
from .exceptions import OCRNotConfiguredError, OCRProviderError

logger = logging.getLogger(__name__)


class OpenAIVisionOCR(BaseOCRService):
    """OpenAI Vision(chat completions) OCR 서비스

    Attributes:
        prompt: 이미지와 함께 보낼 지시문
        max_tokens: 응답 최대 토큰 수
    """

    engine = "OpenAIVision"
    lang = "en"

    def __init__(
        self,
        llm_service: BaseLLMService | None = None,
        prompt: str | None = None,
        max_tokens: int | None = None,
    ):
        """OpenAIVisionOCR 초기화

        Args:
            llm_service: LLM 서비스 (None이면 첫 호출 시 팩토리에서 생성)
            prompt: 지시문 (None이면 VISION_OCR_PROMPT)
            max_tokens: 응답 최대 토큰 수 (None이면 설정값 사용)
        """
        self._llm = llm_service
        self.prompt = prompt or VISION_OCR_PROMPT
        self.max_tokens = max_tokens if max_tokens is not None else settings.vision_max_tokens

    @property
    def llm(self) -> BaseLLMService:
        """LLM 서비스 인스턴스 (lazy initialization)

        Raises:
            OCRNotConfiguredError: OpenAI API 키가 없을 때
        """
        if self._llm is None:
            try:
                self._llm = get_llm_service()
            except LLMConfigurationError as e:
                logger.error(f"Vision LLM 생성 실패: {e}")
                raise OCRNotConfiguredError("OpenAI API key not configured") from e
        return self._llm

    def recognize(self, image_data: str) -> OCRResultEnvelope:
        """Vision 모델로 텍스트 인식

        Args:
            image_data: data URL (순수 base64면 image/jpeg data URL로 감쌈)

        Returns:
            OCRResultEnvelope 객체 (모델 응답 전체가 텍스트 하나)

        Raises:
            OCRNotConfiguredError: OpenAI API 키 누락
            OCRProviderError: OpenAI API 호출 실패
        """
        llm = self.llm
        source = self._source_of(image_data)

        try:
            response = llm.create_vision_completion(
                to_image_url(image_data), self.prompt, max_tokens=self.max_tokens
            )
        except OpenAIError as e:
            logger.error(f"OpenAI Vision API 오류: {e}")
            raise OCRProviderError("OpenAI Vision API failed") from e
        except Exception as e:
            # 예: choices가 빈 응답
            logger.exception("OpenAI Vision 응답 처리 실패")
            raise OCRProviderError("OpenAI Vision API failed") from e

        if not response.content:
            return self._create_empty_envelope(source)

        item = OCRItem(rec_texts=[response.content], rec_scores=[1.0], dt_polys=[])
        return self._create_envelope(item, source)


__all__ = ["OpenAIVisionOCR"]
