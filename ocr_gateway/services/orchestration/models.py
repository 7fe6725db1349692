"""오케스트레이션 데이터 모델"""

from enum import Enum


class Language(Enum):
    """인식 언어 (언어별로 OCR 제공자가 달라짐)"""

    KO = "ko"  # 한국어 → CLOVA OCR
    EN = "en"  # 영어/손글씨 → OpenAI Vision

    @classmethod
    def parse(cls, value: "str | Language") -> "Language":
        """문자열/Enum을 Language로 변환

        Raises:
            ValueError: 지원하지 않는 언어
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"지원하지 않는 언어: {value}") from None
