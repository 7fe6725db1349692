"""OCR 게이트웨이 HTTP 클라이언트

다른 서비스/스크립트에서 POST /api/ocr 를 호출할 때 사용합니다.
"""
from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class OCRClientError(RuntimeError):
    """게이트웨이 호출 실패"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OCRClient:
    """OCR 게이트웨이 클라이언트

    Examples:
        >>> with OCRClient("http://127.0.0.1:8000") as client:
        ...     client.recognize_text(data_url, "ko")
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        timeout: float = 60.0,
        http_client: httpx.Client | None = None,
    ):
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def recognize_text(self, image_data: str, lang: str) -> str:
        """이미지 텍스트 인식 요청

        Args:
            image_data: base64 문자열 또는 data URL
            lang: 'ko' | 'en'

        Returns:
            인식된 텍스트

        Raises:
            OCRClientError: 네트워크 오류 또는 비-200 응답
        """
        try:
            response = self.http_client.post(
                "/api/ocr",
                json={"imageData": image_data, "lang": lang},
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"OCR 게이트웨이 호출 실패: {e}")
            raise OCRClientError("OCR request failed") from e

        if not response.is_success:
            logger.error(f"OCR 게이트웨이 오류: status={response.status_code}, body={response.text}")
            raise OCRClientError("OCR request failed", status_code=response.status_code)

        return response.json()["text"]

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> "OCRClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
