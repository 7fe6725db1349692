"""OpenAI API LLM 구현"""

from openai import OpenAI

from ocr_gateway.settings import settings

from .base import BaseLLMService, LLMConfigurationError, LLMResponse, Message


class OpenAILLM(BaseLLMService):
    """OpenAI API를 사용한 LLM 서비스"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: OpenAI | None = None,
    ):
        """OpenAI 클라이언트 초기화

        Args:
            api_key: OpenAI API 키 (None이면 설정값 사용)
            model: 모델명 (None이면 설정값 사용)
            client: 미리 만든 OpenAI 클라이언트 (테스트 주입용)

        Raises:
            LLMConfigurationError: API 키와 클라이언트가 모두 없을 때
        """
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        if client is None and not self.api_key:
            raise LLMConfigurationError("OpenAI API 키가 설정되지 않았습니다.")
        self.client = client or OpenAI(api_key=self.api_key)

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성 (동기, 논-스트리밍)

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens, model 등)

        Returns:
            LLMResponse 객체
        """
        # Message 객체를 OpenAI 형식으로 변환
        openai_messages = [{"role": msg.role, "content": msg.content} for msg in messages]
        model = kwargs.pop("model", self.model)

        # API 호출
        response = self.client.chat.completions.create(
            model=model, messages=openai_messages, **kwargs
        )

        # 응답 변환
        usage = None
        if response.usage is not None:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=response.model,
            usage=usage,
            metadata={"provider": "openai"},
        )
