"""애플리케이션 설정 관리"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

# .env 파일 로드
load_dotenv()

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 한국어 OCR 설정 (NAVER CLOVA OCR)
    ocr_provider: Literal["naver", "dummy"] = Field(
        default="naver", description="한국어 OCR 제공자 (naver | dummy)"
    )
    naver_ocr_secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("NAVER_OCR_SECRET_KEY", "VITE_NAVER_OCR_SECRET_KEY"),
        description="CLOVA OCR X-OCR-SECRET 값",
    )
    naver_ocr_invoke_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("NAVER_OCR_INVOKE_URL", "VITE_NAVER_OCR_INVOKE_URL"),
        description="CLOVA OCR 도메인 호출 URL",
    )
    naver_ocr_timeout: float = Field(default=30.0, description="CLOVA OCR 요청 타임아웃 (초)")
    naver_ocr_image_format: str = Field(
        default="jpg", description="data URL에서 형식을 알 수 없을 때 사용할 이미지 형식"
    )
    naver_ocr_image_name: str = Field(default="test", description="요청 이미지 이름")

    # LLM 설정 (영어/손글씨 인식용 Vision)
    llm_provider: Literal["openai", "dummy"] = Field(
        default="openai", description="LLM 제공자 (openai | dummy)"
    )
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "VITE_OPENAI_API_KEY"),
        description="OpenAI API 키",
    )
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI 모델명")
    vision_max_tokens: int = Field(default=100, description="Vision 응답 최대 토큰 수")

    # 서버 설정
    host: str = Field(default="127.0.0.1", description="바인딩 호스트")
    port: int = Field(default=8000, description="바인딩 포트")
    cors_allow_origins: list[str] = Field(
        default_factory=list, description="CORS 허용 origin 목록 (JSON 배열)"
    )

    # 앱 설정
    app_debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True


# 전역 설정 인스턴스
settings = Settings()


def validate_settings() -> dict[str, str]:
    """설정 유효성 검사 및 경고 메시지 반환"""
    warnings = {}

    # OCR 설정 검증
    if settings.ocr_provider == "naver":
        missing = [
            name
            for name, value in (
                ("NAVER_OCR_SECRET_KEY", settings.naver_ocr_secret_key),
                ("NAVER_OCR_INVOKE_URL", settings.naver_ocr_invoke_url),
            )
            if not value
        ]
        if missing:
            warnings["ocr"] = (
                "CLOVA OCR 사용을 위해서는 "
                f"{', '.join(missing)} 환경변수가 필요합니다."
            )

    # LLM 설정 검증
    if settings.llm_provider == "openai" and not settings.openai_api_key:
        warnings["llm"] = "OpenAI API 사용을 위해서는 OPENAI_API_KEY가 필요합니다."

    return warnings
