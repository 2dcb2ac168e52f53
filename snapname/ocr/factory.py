from typing import ClassVar

from snapname.config.settings import Settings
from snapname.ocr.azure_read_adapter import AzureReadAdapter
from snapname.ocr.base import BaseOcrProvider
from snapname.ocr.google_vision_adapter import GoogleVisionAdapter
from snapname.ocr.orchestrator import FallbackOrchestrator
from snapname.ocr.tesseract_adapter import TesseractAdapter


class OcrProviderFactory:
    """Creates OCR provider adapters and the fallback orchestrator from settings."""

    ADAPTERS: ClassVar[dict[str, type[BaseOcrProvider]]] = {
        "azure": AzureReadAdapter,
        "google": GoogleVisionAdapter,
        "tesseract": TesseractAdapter,
    }

    @classmethod
    def create(cls, provider: str, settings: Settings) -> BaseOcrProvider:
        """Create a single provider adapter."""
        name = provider.lower()
        if name not in cls.ADAPTERS:
            raise ValueError(
                f"Unknown OCR provider '{provider}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if name == "azure":
            return AzureReadAdapter(
                endpoint=settings.azure_vision_endpoint,
                api_key=settings.azure_vision_key,
                poll_interval=settings.azure_poll_interval_seconds,
                max_attempts=settings.azure_poll_max_attempts,
                timeout_seconds=settings.azure_timeout_seconds,
            )
        if name == "google":
            return GoogleVisionAdapter()
        return TesseractAdapter(
            lang=settings.tesseract_lang,
            oem=settings.tesseract_oem,
            psm=settings.tesseract_psm,
        )

    @classmethod
    def create_orchestrator(cls, settings: Settings) -> FallbackOrchestrator:
        """Create every enabled provider once and wrap them in an orchestrator."""
        preferred = settings.ocr_provider.lower()
        if preferred not in FallbackOrchestrator.PRIORITY:
            raise ValueError(
                f"Unknown OCR provider '{settings.ocr_provider}'. "
                f"Choose from: {list(FallbackOrchestrator.PRIORITY)}"
            )
        providers = {
            name: cls.create(name, settings) for name in settings.ocr_enabled_providers
        }
        if not providers:
            raise ValueError("ocr_enabled_providers must name at least one provider")
        return FallbackOrchestrator(providers)
