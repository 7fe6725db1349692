"""
Vision OCR용 프롬프트.

영어/손글씨 이미지를 멀티모달 채팅 모델로 읽을 때 사용하는 고정 지시문.
"""

VISION_OCR_PROMPT = (
    "What text is written in this image? Respond with ONLY the text, no additional words."
)
