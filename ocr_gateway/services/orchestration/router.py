"""OCR 라우터 (Router)

언어 플래그를 기준으로 OCR 제공자를 선택하고,
제공자별 결과를 하나의 평문 텍스트로 정규화합니다.
"""

import logging
import threading
from typing import Callable

from ocr_gateway.services.ocr.base import BaseOCRService
from ocr_gateway.services.ocr.factory import get_ocr_service

from .models import Language

logger = logging.getLogger(__name__)


class OCRRouter:
    """OCR 디스패치 라우터

    언어 → 서비스 선택 → 인식 → 텍스트 정규화 파이프라인을 관리합니다.
    서비스 인스턴스는 언어별로 처음 필요할 때 한 번 만들어 재사용합니다.
    """

    def __init__(self, service_factory: Callable[[str], BaseOCRService] = get_ocr_service):
        """
        Args:
            service_factory: 언어 코드를 받아 OCR 서비스를 만드는 함수
        """
        self.service_factory = service_factory
        self._services: dict[Language, BaseOCRService] = {}
        self._lock = threading.Lock()

    def route(self, lang: "str | Language") -> BaseOCRService:
        """언어에 맞는 OCR 서비스 반환

        Args:
            lang: 'ko' | 'en'

        Returns:
            BaseOCRService 인스턴스

        Raises:
            ValueError: 지원하지 않는 언어
        """
        language = Language.parse(lang)
        with self._lock:
            service = self._services.get(language)
            if service is None:
                service = self.service_factory(language.value)
                self._services[language] = service
                logger.info(f"OCR 서비스 생성: lang={language.value}, engine={service.engine}")
        return service

    def recognize(self, image_data: str, lang: "str | Language") -> str:
        """이미지에서 텍스트를 인식해 평문으로 반환

        Args:
            image_data: base64 문자열 또는 data URL
            lang: 'ko' | 'en'

        Returns:
            인식된 텍스트 (공백 하나로 이어 붙이고 양끝 공백 제거)

        Raises:
            OCRError: 설정 누락 또는 제공자 호출 실패
        """
        service = self.route(lang)
        envelope = service.recognize(image_data)
        text = envelope.data.joined_text()
        logger.info(
            f"OCR 완료: lang={envelope.meta.lang}, engine={envelope.meta.engine}, "
            f"items={envelope.meta.items}, chars={len(text)}"
        )
        return text

    def close(self) -> None:
        """생성한 서비스들의 자원 정리"""
        with self._lock:
            services = list(self._services.values())
            self._services.clear()
        for service in services:
            service.close()
