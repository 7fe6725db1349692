"""OCR 서비스 예외

HTTP 계층은 이 예외들의 message/status_code를 그대로 응답으로 사용합니다.
"""


class OCRError(Exception):
    """OCR 처리 실패 기본 예외"""

    default_message = "OCR request failed"
    default_status_code = 500

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status_code
        super().__init__(self.message)


class OCRNotConfiguredError(OCRError):
    """제공자 자격 증명/엔드포인트가 설정되지 않음 (호출 전에 발생)"""

    default_message = "OCR credentials not configured"


class OCRProviderError(OCRError):
    """외부 제공자 호출 실패 (비정상 HTTP 상태, 네트워크 오류, 해석 불가 응답)"""

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        upstream_status: int | None = None,
    ):
        super().__init__(message, status_code)
        self.upstream_status = upstream_status

    @classmethod
    def from_upstream_status(cls, upstream_status: int, message: str | None = None) -> "OCRProviderError":
        """제공자 HTTP 상태를 게이트웨이 응답 상태로 변환 (5xx 유지, 그 외 502)"""
        status_code = upstream_status if upstream_status >= 500 else 502
        return cls(message, status_code=status_code, upstream_status=upstream_status)
