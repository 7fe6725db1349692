"""이미지 문자열(base64 / data URL) 처리 유틸리티"""

import re

DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)
WHITESPACE_RE = re.compile(r"\s")

# MIME 서브타입 -> CLOVA OCR 형식 이름
_FORMAT_ALIASES = {"jpeg": "jpg", "pjpeg": "jpg", "tif": "tiff"}
# CLOVA OCR이 받는 형식
SUPPORTED_FORMATS = frozenset({"jpg", "png", "pdf", "tiff"})


def clean_base64_data(data: str) -> str:
    """data URL 헤더와 줄바꿈/공백을 제거한 순수 base64 문자열 반환"""
    _, base64_data = parse_data_url(data)
    return WHITESPACE_RE.sub("", base64_data)


def is_data_url(data: str) -> bool:
    """data URL 형식인지 확인"""
    return DATA_URL_RE.match(data) is not None


def parse_data_url(data: str) -> tuple[str | None, str]:
    """data URL을 (MIME 타입, base64 본문)으로 분리

    data URL이 아니면 MIME 타입은 None, 본문은 입력 그대로 반환합니다.
    """
    match = DATA_URL_RE.match(data)
    if match is None:
        return None, data
    return match.group("mime"), match.group("data")


def to_image_url(data: str, mime_type: str = "image/jpeg") -> str:
    """이미지 문자열을 Vision API에 넘길 URL로 변환

    data URL 또는 http(s) URL은 그대로 두고, 순수 base64 문자열만 data URL로 감쌉니다.
    """
    if data.startswith(("data:", "http://", "https://")):
        return data
    return f"data:{mime_type};base64,{WHITESPACE_RE.sub('', data)}"


def image_format_from_data_url(data: str, default: str = "jpg") -> str:
    """data URL의 MIME 타입에서 CLOVA OCR 형식 이름 추출 (jpeg -> jpg)

    data URL이 아니거나 CLOVA OCR이 받지 않는 형식이면 default를 반환합니다.
    """
    mime_type, _ = parse_data_url(data)
    if not mime_type:
        return default
    subtype = mime_type.split("/", 1)[1].lower()
    image_format = _FORMAT_ALIASES.get(subtype, subtype)
    return image_format if image_format in SUPPORTED_FORMATS else default
