from .app import create_app
from .client import OCRClient, OCRClientError

__all__ = ["create_app", "OCRClient", "OCRClientError"]
