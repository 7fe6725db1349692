"""더미 LLM 구현 (테스트/오프라인 실행용)"""

from .base import BaseLLMService, LLMResponse, Message


class DummyLLM(BaseLLMService):
    """테스트용 더미 LLM 서비스

    이미지가 포함된 요청에는 고정된 인식 결과를, 그 외에는 마지막 사용자 메시지를 되돌려줍니다.
    """

    DUMMY_VISION_TEXT = "[dummy vision result]"

    def __init__(self):
        self.calls: list[list[Message]] = []

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """더미 응답 생성

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (무시됨)

        Returns:
            LLMResponse 객체
        """
        self.calls.append(messages)

        # 마지막 사용자 메시지 추출
        user_content = ""
        for msg in reversed(messages):
            if msg.role == "user":
                user_content = msg.content
                break

        if isinstance(user_content, list):
            response_text = self.DUMMY_VISION_TEXT
        else:
            response_text = f"[dummy] {user_content[:100]}"

        return LLMResponse(
            content=response_text,
            model="dummy-model",
            usage={"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0},
            metadata={"provider": "dummy"},
        )
