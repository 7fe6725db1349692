"""OCR 게이트웨이 클라이언트 테스트"""

import json

import httpx
import pytest
from starlette.testclient import TestClient

from fixtures import RecordingTransport
from ocr_gateway.api import OCRClient, OCRClientError, create_app
from ocr_gateway.services.ocr.dummy_ocr import DummyOCR
from ocr_gateway.services.orchestration import OCRRouter


def _client(handler):
    transport = RecordingTransport(handler)
    http_client = httpx.Client(base_url="http://gateway.test", transport=transport)
    return OCRClient(http_client=http_client), transport


class TestOCRClient:
    """MockTransport 기반 테스트"""

    def test_recognize_text(self, sample_data_url):
        client, transport = _client(lambda request: httpx.Response(200, json={"text": "안녕"}))

        assert client.recognize_text(sample_data_url, "ko") == "안녕"

        sent = transport.requests[0]
        assert sent.method == "POST"
        assert sent.url.path == "/api/ocr"
        assert json.loads(sent.content) == {"imageData": sample_data_url, "lang": "ko"}

    @pytest.mark.parametrize("status", [400, 500, 502])
    def test_error_status(self, sample_data_url, status):
        client, _ = _client(lambda request: httpx.Response(status, text="OCR request failed"))

        with pytest.raises(OCRClientError) as exc_info:
            client.recognize_text(sample_data_url, "en")

        assert exc_info.value.status_code == status
        assert str(exc_info.value) == "OCR request failed"

    def test_network_error(self, sample_data_url):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = _client(handler)

        with pytest.raises(OCRClientError) as exc_info:
            client.recognize_text(sample_data_url, "ko")

        assert exc_info.value.status_code is None

    def test_injected_client_not_closed(self):
        client, _ = _client(lambda request: httpx.Response(200, json={"text": ""}))
        with client:
            pass
        assert client.http_client.is_closed is False

    def test_owned_client_closed(self):
        with OCRClient("http://gateway.test", timeout=5.0) as client:
            http_client = client.http_client
            assert http_client.base_url.host == "gateway.test"
        assert http_client.is_closed is True


class TestEndToEnd:
    """클라이언트 → 앱 → 더미 OCR"""

    def test_round_trip(self, sample_data_url):
        service = DummyOCR(lang="ko", text="안녕")
        app = create_app(OCRRouter(service_factory=lambda lang: service))
        client = OCRClient(http_client=TestClient(app))

        assert client.recognize_text(sample_data_url, "ko") == "안녕"
        assert service.calls == [sample_data_url]

    def test_bad_language_raises(self, sample_data_url):
        app = create_app(OCRRouter(service_factory=lambda lang: DummyOCR(lang=lang)))
        client = OCRClient(http_client=TestClient(app))

        with pytest.raises(OCRClientError) as exc_info:
            client.recognize_text(sample_data_url, "ja")

        assert exc_info.value.status_code == 400
