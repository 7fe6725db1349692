"""테스트 픽스처 및 설정"""

import base64
from unittest.mock import Mock, patch

import httpx
import pytest

from fixtures import INVOKE_URL, SECRET_KEY, RecordingTransport, chat_completion
from ocr_gateway.services.llm.dummy_llm import DummyLLM
from ocr_gateway.services.llm.openai_llm import OpenAILLM
from ocr_gateway.services.ocr.dummy_ocr import DummyOCR
from ocr_gateway.services.ocr.naver_ocr import NaverClovaOCR
from ocr_gateway.services.ocr.vision_ocr import OpenAIVisionOCR


@pytest.fixture
def sample_base64():
    """샘플 이미지 base64"""
    return base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg-bytes").decode("ascii")


@pytest.fixture
def sample_data_url(sample_base64):
    """샘플 이미지 data URL"""
    return f"data:image/jpeg;base64,{sample_base64}"


@pytest.fixture
def dummy_ocr_service():
    """더미 OCR 서비스 픽스처"""
    return DummyOCR()


@pytest.fixture
def dummy_llm_service():
    """더미 LLM 서비스 픽스처"""
    return DummyLLM()


@pytest.fixture
def openai_client():
    """Mock OpenAI 클라이언트 ("Hello World" 응답)"""
    client = Mock()
    client.chat.completions.create = Mock(return_value=chat_completion("Hello World"))
    return client


@pytest.fixture
def vision_ocr(openai_client):
    """Mock 클라이언트를 쓰는 OpenAIVisionOCR"""
    llm = OpenAILLM(api_key="sk-test", model="gpt-4o-mini", client=openai_client)
    return OpenAIVisionOCR(llm_service=llm, max_tokens=100)


@pytest.fixture
def make_naver_ocr():
    """핸들러로 응답을 정하는 NaverClovaOCR 생성기

    Returns:
        (handler, **kwargs) -> (NaverClovaOCR, RecordingTransport)
    """

    def _make(handler, **kwargs):
        transport = RecordingTransport(handler)
        params = {"secret_key": SECRET_KEY, "invoke_url": INVOKE_URL}
        params.update(kwargs)
        ocr = NaverClovaOCR(http_client=httpx.Client(transport=transport), **params)
        return ocr, transport

    return _make


@pytest.fixture
def naver_settings_without_credentials():
    """CLOVA 자격 증명이 비어 있는 설정으로 교체"""
    with patch("ocr_gateway.services.ocr.naver_ocr.settings") as mock_settings:
        mock_settings.naver_ocr_secret_key = None
        mock_settings.naver_ocr_invoke_url = None
        mock_settings.naver_ocr_timeout = 30.0
        mock_settings.naver_ocr_image_format = "jpg"
        mock_settings.naver_ocr_image_name = "test"
        yield mock_settings
