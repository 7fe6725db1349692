"""NAVER CLOVA OCR 기반 OCR 서비스

한국어 이미지를 CLOVA OCR General API로 인식합니다.
data URL 헤더와 공백을 제거한 base64를 V2 요청 본문에 담아
X-OCR-SECRET 헤더와 함께 도메인 호출 URL로 POST 합니다.

사용 예시:
    from ocr_gateway.services.ocr.naver_ocr import NaverClovaOCR

    ocr = NaverClovaOCR()
    result = ocr.recognize("data:image/jpeg;base64,....")
    text = result.data.joined_text()
"""
from __future__ import annotations

import logging
import time
from typing import List

import httpx

from ocr_gateway.models.envelopes import OCRItem, OCRResultEnvelope
from ocr_gateway.models.naver import NaverOCRImage, NaverOCRRequest, NaverOCRResponse
from ocr_gateway.settings import settings
from ocr_gateway.utils.images import clean_base64_data, image_format_from_data_url

from .base import BaseOCRService
from .exceptions import OCRNotConfiguredError, OCRProviderError

logger = logging.getLogger(__name__)


class NaverClovaOCR(BaseOCRService):
    """NAVER CLOVA OCR 서비스

    Attributes:
        secret_key: X-OCR-SECRET 헤더 값
        invoke_url: 도메인 호출 URL
        timeout: 요청 타임아웃 (초)

    Examples:
        >>> ocr = NaverClovaOCR(secret_key="...", invoke_url="https://.../general")
        >>> ocr.recognize(image_b64).data.joined_text()
        '안녕'
    """

    engine = "NaverClovaOCR"
    lang = "ko"
    api_version = "V2"

    def __init__(
        self,
        secret_key: str | None = None,
        invoke_url: str | None = None,
        timeout: float | None = None,
        image_format: str | None = None,
        image_name: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        """NaverClovaOCR 초기화

        Args:
            secret_key: X-OCR-SECRET 값 (None이면 설정값 사용)
            invoke_url: 호출 URL (None이면 설정값 사용)
            timeout: 요청 타임아웃 초 (None이면 설정값 사용)
            image_format: 기본 이미지 형식 (data URL에서 알 수 없을 때)
            image_name: 요청 이미지 이름
            http_client: 미리 만든 httpx.Client (테스트 주입용)
        """
        self.secret_key = secret_key or settings.naver_ocr_secret_key
        self.invoke_url = invoke_url or settings.naver_ocr_invoke_url
        self.timeout = timeout if timeout is not None else settings.naver_ocr_timeout
        self.image_format = image_format or settings.naver_ocr_image_format
        self.image_name = image_name or settings.naver_ocr_image_name
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def is_configured(self) -> bool:
        """자격 증명과 호출 URL이 모두 있는지 여부"""
        return bool(self.secret_key and self.invoke_url)

    @property
    def http_client(self) -> httpx.Client:
        """httpx.Client 인스턴스 (lazy initialization)"""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self.timeout)
        return self._http_client

    def build_request(self, image_data: str) -> NaverOCRRequest:
        """CLOVA OCR 요청 본문 생성

        Args:
            image_data: base64 문자열 또는 data URL

        Returns:
            NaverOCRRequest (requestId/timestamp는 현재 시각 ms)
        """
        timestamp = int(time.time() * 1000)
        return NaverOCRRequest(
            version=self.api_version,
            request_id=str(timestamp),
            timestamp=timestamp,
            lang=self.lang,
            images=[
                NaverOCRImage(
                    format=image_format_from_data_url(image_data, default=self.image_format),
                    name=self.image_name,
                    data=clean_base64_data(image_data),
                )
            ],
        )

    def _convert_to_ocr_item(self, result: NaverOCRResponse) -> OCRItem:
        """CLOVA OCR 응답을 OCRItem으로 변환

        첫 번째 이미지의 fields만 사용합니다.

        Args:
            result: CLOVA OCR 응답

        Returns:
            OCRItem 인스턴스
        """
        if not result.images or not result.images[0].fields:
            return OCRItem(rec_texts=[], rec_scores=[], dt_polys=[])

        image = result.images[0]
        if image.infer_result and image.infer_result != "SUCCESS":
            logger.warning(f"CLOVA OCR 인식 결과 비정상: inferResult={image.infer_result}, message={image.message}")

        rec_texts: List[str] = []
        rec_scores: List[float] = []
        dt_polys: List[List[List[float]]] = []

        for field in image.fields:
            rec_texts.append(field.infer_text)
            rec_scores.append(field.infer_confidence if field.infer_confidence is not None else 0.0)
            if field.bounding_poly is not None:
                dt_polys.append([[v.x, v.y] for v in field.bounding_poly.vertices])
            else:
                dt_polys.append([])

        return OCRItem(rec_texts=rec_texts, rec_scores=rec_scores, dt_polys=dt_polys)

    def recognize(self, image_data: str) -> OCRResultEnvelope:
        """CLOVA OCR로 텍스트 인식

        Args:
            image_data: base64 문자열 또는 data URL

        Returns:
            OCRResultEnvelope 객체

        Raises:
            OCRNotConfiguredError: 자격 증명/호출 URL 누락 (네트워크 호출 전)
            OCRProviderError: 비정상 HTTP 상태, 네트워크 오류, 해석 불가 응답
        """
        if not self.is_configured:
            raise OCRNotConfiguredError()

        source = self._source_of(image_data)
        payload = self.build_request(image_data).model_dump(by_alias=True)
        headers = {
            "Content-Type": "application/json",
            "X-OCR-SECRET": self.secret_key,
            "Accept": "application/json",
        }

        logger.info(f"CLOVA OCR 요청 전송: requestId={payload['requestId']}")
        try:
            response = self.http_client.post(self.invoke_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"CLOVA OCR 호출 실패: {e}")
            raise OCRProviderError() from e

        if not response.is_success:
            logger.error(f"CLOVA OCR 오류 응답: status={response.status_code}, body={response.text}")
            raise OCRProviderError.from_upstream_status(response.status_code)

        try:
            result = NaverOCRResponse.model_validate(response.json())
        except ValueError as e:
            logger.error(f"CLOVA OCR 응답 해석 실패: {e}")
            raise OCRProviderError() from e

        logger.debug(f"CLOVA OCR 응답: {result.model_dump(by_alias=True)}")
        item = self._convert_to_ocr_item(result)
        return self._create_envelope(item, source)

    def close(self) -> None:
        """직접 만든 httpx.Client 정리"""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None


__all__ = ["NaverClovaOCR"]
