"""HTTP 요청/응답 스키마"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OCRRequest(BaseModel):
    """POST /api/ocr 요청 본문"""

    model_config = ConfigDict(populate_by_name=True)

    image_data: str = Field(
        alias="imageData", min_length=1, description="base64 문자열 또는 data URL"
    )
    lang: Literal["ko", "en"] = Field(description="인식 언어 (ko | en)")


class OCRResponse(BaseModel):
    """POST /api/ocr 성공 응답 본문"""

    text: str = ""
