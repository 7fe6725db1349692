"""NAVER CLOVA OCR 요청/응답 Envelope 모델

CLOVA OCR General API의 JSON 본문은 camelCase 키를 사용하므로
각 필드에 alias를 두고, 직렬화 시 by_alias=True로 내보냅니다.
응답의 알 수 없는 키는 무시합니다.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# 요청
# =============================================================================

class NaverOCRImage(_CamelModel):
    """요청에 포함되는 이미지 한 장"""
    format: str = Field(description="이미지 형식 (jpg, png 등)")
    name: str = Field(description="이미지 이름 (응답에 그대로 돌아옴)")
    data: str = Field(description="헤더/공백이 제거된 base64 데이터")


class NaverOCRRequest(_CamelModel):
    """CLOVA OCR 요청 본문"""
    version: str = "V2"
    request_id: str = Field(alias="requestId")
    timestamp: int = Field(description="요청 시각 (epoch ms)")
    lang: str = "ko"
    images: List[NaverOCRImage] = Field(default_factory=list)


# =============================================================================
# 응답
# =============================================================================

class NaverVertex(_CamelModel):
    x: float = 0.0
    y: float = 0.0


class NaverBoundingPoly(_CamelModel):
    vertices: List[NaverVertex] = Field(default_factory=list)


class NaverOCRField(_CamelModel):
    """인식된 텍스트 필드 하나"""
    infer_text: str = Field(default="", alias="inferText")
    infer_confidence: Optional[float] = Field(default=None, alias="inferConfidence")
    bounding_poly: Optional[NaverBoundingPoly] = Field(default=None, alias="boundingPoly")
    line_break: bool = Field(default=False, alias="lineBreak")


class NaverOCRImageResult(_CamelModel):
    """이미지 한 장에 대한 인식 결과"""
    uid: Optional[str] = None
    name: Optional[str] = None
    infer_result: Optional[str] = Field(default=None, alias="inferResult")
    message: Optional[str] = None
    fields: Optional[List[NaverOCRField]] = None


class NaverOCRResponse(_CamelModel):
    """CLOVA OCR 응답 본문"""
    version: Optional[str] = None
    request_id: Optional[str] = Field(default=None, alias="requestId")
    timestamp: Optional[int] = None
    images: Optional[List[NaverOCRImageResult]] = None


__all__ = [
    "NaverOCRImage",
    "NaverOCRRequest",
    "NaverVertex",
    "NaverBoundingPoly",
    "NaverOCRField",
    "NaverOCRImageResult",
    "NaverOCRResponse",
]
