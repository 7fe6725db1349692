"""OCR 서비스 기본 인터페이스

모든 OCR 서비스(NaverClovaOCR, OpenAIVisionOCR, DummyOCR)가 상속하는 기본 인터페이스.
입력은 base64 문자열 또는 data URL, 반환은 통일된 OCRResultEnvelope.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ocr_gateway.models.envelopes import OCRData, OCRItem, OCRMeta, OCRResultEnvelope, Source
from ocr_gateway.utils.images import is_data_url

logger = logging.getLogger(__name__)


class BaseOCRService(ABC):
    """OCR 서비스 기본 추상 클래스

    필수 구현:
        - recognize(str): 핵심 추상 메서드

    기본 구현 제공 (오버라이드 가능):
        - close(): 보유한 네트워크 자원 정리
    """

    engine: str = "BaseOCR"
    lang: str = "unknown"

    @abstractmethod
    def recognize(self, image_data: str) -> OCRResultEnvelope:
        """이미지에서 텍스트 인식 (핵심 추상 메서드)

        Args:
            image_data: base64 문자열 또는 data URL

        Returns:
            OCRResultEnvelope 객체

        Raises:
            OCRError: 설정 누락 또는 제공자 호출 실패
        """
        pass

    def close(self) -> None:
        """보유한 자원 정리 (기본: 없음)"""
        return None

    @staticmethod
    def _source_of(image_data: str) -> Source:
        return "data_url" if is_data_url(image_data) else "base64"

    def _create_envelope(self, item: OCRItem, source: Source) -> OCRResultEnvelope:
        """OCRItem 하나를 OCRResultEnvelope로 감싸기

        Args:
            item: 인식 결과
            source: 입력 소스 타입 ('base64', 'data_url')

        Returns:
            OCRResultEnvelope
        """
        return OCRResultEnvelope(
            stage="ocr",
            data=OCRData(items=[item]),
            meta=OCRMeta(items=len(item), source=source, lang=self.lang, engine=self.engine),
        )

    def _create_empty_envelope(self, source: Source = "base64") -> OCRResultEnvelope:
        """빈 OCRResultEnvelope 생성 (인식된 텍스트가 없을 때)"""
        return self._create_envelope(OCRItem(rec_texts=[], rec_scores=[], dt_polys=[]), source)


__all__ = [
    "BaseOCRService",
]
