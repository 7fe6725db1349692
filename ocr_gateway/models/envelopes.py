"""OCR 결과 Envelope 모델

제공자(CLOVA OCR, OpenAI Vision 등)마다 다른 응답을
일관되고 타입 안전하게 다루기 위한 Pydantic 모델 정의.
"""
from __future__ import annotations

from typing import Generic, List, Literal, Optional, TypeVar
from typing_extensions import TypeAlias

from pydantic import BaseModel, Field


# =============================================================================
# 기본 타입 정의
# =============================================================================

Stage: TypeAlias = Literal['ocr']
"""처리 단계"""

Source: TypeAlias = Literal['base64', 'data_url']
"""입력 이미지 문자열 형식"""

TData = TypeVar('TData')
TMeta = TypeVar('TMeta')


class Envelope(BaseModel, Generic[TData, TMeta]):
    """단계별 데이터와 메타데이터를 감싸는 공통 Envelope 모델"""
    stage: Stage
    data: TData
    meta: TMeta
    version: str = '1.0'


# =============================================================================
# OCR 단계 모델
# =============================================================================

class OCRItem(BaseModel):
    """단일 이미지의 OCR 결과"""
    rec_texts: List[str] = Field(default_factory=list, description="인식된 텍스트 리스트")
    rec_scores: List[float] = Field(default_factory=list, description="인식 신뢰도 리스트")
    dt_polys: List[List[List[float]]] = Field(default_factory=list, description="텍스트 감지 영역 폴리곤")
    rec_polys: Optional[List[List[List[float]]]] = Field(default=None, description="텍스트 인식 영역 폴리곤")

    def __len__(self) -> int:
        return len(self.rec_texts)


class OCRData(BaseModel):
    """OCR 단계 결과 데이터"""
    items: List[OCRItem] = Field(default_factory=list, description="OCR 결과 아이템 리스트")

    def joined_text(self, sep: str = " ") -> str:
        """모든 아이템의 인식 텍스트를 순서대로 이어 붙이고 양끝 공백을 제거"""
        texts = [text for item in self.items for text in item.rec_texts]
        return sep.join(texts).strip()


class OCRMeta(BaseModel):
    """OCR 단계 결과 메타데이터"""
    items: Optional[int] = Field(default=None, description="총 인식된 텍스트 개수")
    source: Optional[Source] = Field(default=None, description="입력 소스 타입")
    lang: Optional[str] = Field(default=None, description="OCR 인식 언어")
    engine: Optional[str] = Field(default=None, description="사용된 OCR 엔진명")


# =============================================================================
# 타입 별칭 (Type Aliases)
# =============================================================================

OCRResultEnvelope = Envelope[OCRData, OCRMeta]


__all__ = [
    'Stage',
    'Source',
    'Envelope',
    'OCRItem',
    'OCRData',
    'OCRMeta',
    'OCRResultEnvelope',
]
