"""ocr-gateway: 언어별 외부 OCR 제공자를 하나의 텍스트 결과로 묶는 프록시"""

__version__ = "0.1.0"
