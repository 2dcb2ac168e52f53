from snapname.ocr.base import BaseOcrProvider
from snapname.ocr.factory import OcrProviderFactory
from snapname.ocr.orchestrator import FallbackOrchestrator

__all__ = ["BaseOcrProvider", "FallbackOrchestrator", "OcrProviderFactory"]
