"""더미 OCR 구현 (테스트/오프라인 실행용)"""

from ocr_gateway.models.envelopes import OCRItem, OCRResultEnvelope
from .base import BaseOCRService


class DummyOCR(BaseOCRService):
    """테스트용 더미 OCR 서비스"""

    engine = "DummyOCR"

    def __init__(self, lang: str = "ko", text: str = "[더미 OCR 결과]"):
        self.lang = lang
        self.text = text
        self.calls: list[str] = []

    def recognize(self, image_data: str) -> OCRResultEnvelope:
        """더미 텍스트 반환

        Args:
            image_data: base64 문자열 또는 data URL (기록만 함)

        Returns:
            OCRResultEnvelope 객체
        """
        self.calls.append(image_data)

        # 단순 텍스트만 - 위치 정보 없음
        item = OCRItem(rec_texts=[self.text], rec_scores=[1.0], dt_polys=[])
        return self._create_envelope(item, self._source_of(image_data))
