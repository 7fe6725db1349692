"""테스트 헬퍼 함수

이 모듈은 테스트에서 공통으로 사용하는 응답 생성기와 Mock transport를 제공합니다.
"""

import json
from types import SimpleNamespace

import httpx

INVOKE_URL = "https://clova.example.com/custom/v1/123/abc/general"
SECRET_KEY = "test-secret"


class RecordingTransport(httpx.MockTransport):
    """요청을 기록하는 httpx MockTransport"""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def naver_response(*texts: str, **image_extra) -> dict:
    """CLOVA OCR 성공 응답 본문 생성

    Args:
        *texts: 필드별 inferText
        **image_extra: images[0]에 덮어쓸 키

    Returns:
        응답 JSON dict
    """
    fields = [
        {
            "valueType": "ALL",
            "inferText": text,
            "inferConfidence": 0.99,
            "boundingPoly": {
                "vertices": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 5}, {"x": 0, "y": 5}]
            },
            "type": "NORMAL",
            "lineBreak": False,
        }
        for text in texts
    ]
    image = {"uid": "u1", "name": "test", "inferResult": "SUCCESS", "message": "SUCCESS", "fields": fields}
    image.update(image_extra)
    return {"version": "V2", "requestId": "1", "timestamp": 1, "images": [image]}


def chat_completion(content):
    """OpenAI chat completion 응답 흉내"""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        model="gpt-4o-mini",
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=2, total_tokens=12),
    )
