"""Envelope 모델 테스트

OCRResultEnvelope, OCRItem, OCRData, OCRMeta 및 CLOVA 요청/응답 모델 검증
"""

import pytest
from pydantic import ValidationError

from fixtures import naver_response
from ocr_gateway.models.api import OCRRequest, OCRResponse
from ocr_gateway.models.envelopes import OCRData, OCRItem, OCRMeta, OCRResultEnvelope
from ocr_gateway.models.naver import NaverOCRImage, NaverOCRRequest, NaverOCRResponse


class TestOCRItem:
    """OCRItem 모델 테스트"""

    def test_ocr_item_len(self):
        """OCRItem __len__"""
        item = OCRItem(rec_texts=["A", "B", "C"], rec_scores=[0.9, 0.9, 0.9])
        assert len(item) == 3

    def test_ocr_item_empty(self):
        """빈 OCRItem 생성"""
        item = OCRItem()
        assert item.rec_texts == []
        assert item.rec_polys is None
        assert len(item) == 0


class TestOCRData:
    """OCRData.joined_text 테스트"""

    def test_joined_text_single_space(self):
        data = OCRData(items=[OCRItem(rec_texts=["안녕", "하세요"])])
        assert data.joined_text() == "안녕 하세요"

    def test_joined_text_across_items_and_trimmed(self):
        data = OCRData(items=[OCRItem(rec_texts=["  첫줄"]), OCRItem(rec_texts=["둘째줄 "])])
        assert data.joined_text() == "첫줄 둘째줄"

    def test_joined_text_empty(self):
        assert OCRData().joined_text() == ""
        assert OCRData(items=[OCRItem()]).joined_text() == ""


class TestOCRResultEnvelope:
    """OCRResultEnvelope 테스트"""

    def test_create_envelope(self):
        envelope = OCRResultEnvelope(
            stage="ocr",
            data=OCRData(items=[OCRItem(rec_texts=["hi"], rec_scores=[1.0])]),
            meta=OCRMeta(items=1, source="data_url", lang="en", engine="OpenAIVision"),
        )
        assert envelope.version == "1.0"
        assert envelope.meta.engine == "OpenAIVision"

    def test_invalid_source(self):
        with pytest.raises(ValidationError):
            OCRMeta(source="path")


class TestApiModels:
    """HTTP 요청/응답 스키마 테스트"""

    def test_request_alias(self):
        body = OCRRequest.model_validate({"imageData": "QUJD", "lang": "ko"})
        assert body.image_data == "QUJD"
        assert body.lang == "ko"

    @pytest.mark.parametrize(
        "payload",
        [
            {"imageData": "QUJD", "lang": "ja"},
            {"lang": "ko"},
            {"imageData": "", "lang": "en"},
        ],
    )
    def test_request_invalid(self, payload):
        with pytest.raises(ValidationError):
            OCRRequest.model_validate(payload)

    def test_response_default(self):
        assert OCRResponse().model_dump() == {"text": ""}


class TestNaverModels:
    """CLOVA OCR 모델 테스트"""

    def test_request_serializes_camel_case(self):
        request = NaverOCRRequest(
            request_id="1700000000000",
            timestamp=1700000000000,
            images=[NaverOCRImage(format="jpg", name="test", data="QUJD")],
        )
        dumped = request.model_dump(by_alias=True)
        assert dumped == {
            "version": "V2",
            "requestId": "1700000000000",
            "timestamp": 1700000000000,
            "lang": "ko",
            "images": [{"format": "jpg", "name": "test", "data": "QUJD"}],
        }

    def test_response_parses_fields(self):
        result = NaverOCRResponse.model_validate(naver_response("안녕"))
        field = result.images[0].fields[0]
        assert field.infer_text == "안녕"
        assert field.infer_confidence == 0.99
        assert len(field.bounding_poly.vertices) == 4

    def test_response_without_images(self):
        result = NaverOCRResponse.model_validate({"version": "V2"})
        assert result.images is None
