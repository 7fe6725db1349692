"""LLM 서비스 기본 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class LLMConfigurationError(RuntimeError):
    """LLM 클라이언트를 만들 수 없는 설정 오류 (API 키 누락 등)"""


@dataclass
class Message:
    """채팅 메시지"""

    role: str  # "system" | "user" | "assistant"
    content: str | list[dict[str, Any]]  # 멀티모달이면 content part 리스트


@dataclass
class LLMResponse:
    """LLM 응답 데이터 클래스"""

    content: str
    model: str | None = None
    usage: dict | None = None
    metadata: dict | None = None


class BaseLLMService(ABC):
    """LLM 서비스 기본 추상 클래스"""

    @abstractmethod
    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성 (동기, 논-스트리밍)

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            LLMResponse 객체
        """
        pass

    def create_vision_completion(
        self, image_url: str, prompt: str, max_tokens: int | None = None
    ) -> LLMResponse:
        """이미지 한 장과 지시문으로 응답 생성

        Args:
            image_url: 이미지 URL 또는 data URL
            prompt: 이미지와 함께 보낼 지시문
            max_tokens: 응답 최대 토큰 수 (None이면 제한 없음)

        Returns:
            LLMResponse 객체
        """
        message = Message(
            role="user",
            content=[
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": image_url}},
            ],
        )
        kwargs = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        return self.generate([message], **kwargs)

    def chat(self, user_message: str, system_message: str | None = None, **kwargs) -> str:
        """간단한 채팅 인터페이스

        Args:
            user_message: 사용자 메시지
            system_message: 시스템 메시지 (선택)
            **kwargs: 추가 파라미터

        Returns:
            응답 텍스트
        """
        messages = []
        if system_message:
            messages.append(Message(role="system", content=system_message))
        messages.append(Message(role="user", content=user_message))

        response = self.generate(messages, **kwargs)
        return response.content
