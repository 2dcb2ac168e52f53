"""Ordered OCR provider fallback.

The chain for a request is the priority row of the preferred provider,
restricted to the providers that were configured. Providers are tried in
that order; the first one that returns (even an empty string) wins. A
``ProviderError`` advances the chain. When every provider has failed the
last error is re-raised wrapped in ``AllProvidersExhaustedError``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from snapname.logging.logger import Log
from snapname.ocr.base import BaseOcrProvider
from snapname.ocr.exceptions import AllProvidersExhaustedError, ProviderError
from snapname.ocr.models import ExtractionRequest, ExtractionResult, ProviderAttempt


class FallbackOrchestrator:
    """Tries OCR providers in priority order until one returns text."""

    PRIORITY: ClassVar[dict[str, tuple[str, ...]]] = {
        "azure": ("azure", "google", "tesseract"),
        "google": ("google", "azure", "tesseract"),
        "tesseract": ("tesseract", "azure", "google"),
    }

    def __init__(self, providers: Mapping[str, BaseOcrProvider]) -> None:
        self._providers = dict(providers)

    @property
    def providers(self) -> dict[str, BaseOcrProvider]:
        return dict(self._providers)

    def provider_order(self, preferred_provider: str) -> tuple[str, ...]:
        """Return the configured providers in the order they will be tried."""
        preferred = preferred_provider.lower()
        row = self.PRIORITY.get(preferred)
        if row is None:
            raise ValueError(
                f"Unknown OCR provider '{preferred_provider}'. "
                f"Choose from: {list(self.PRIORITY)}"
            )
        return tuple(name for name in row if name in self._providers)

    def build_request(self, image_path: Path, preferred_provider: str) -> ExtractionRequest:
        return ExtractionRequest(
            image_path=image_path,
            provider_order=self.provider_order(preferred_provider),
        )

    async def extract_with_fallback(
        self,
        image_path: Path,
        preferred_provider: str,
    ) -> ExtractionResult:
        """Run the fallback chain for one image.

        Raises:
            AllProvidersExhaustedError: if no provider returned.
            ValueError: if the preference is unknown or no provider is configured.
        """
        request = self.build_request(image_path, preferred_provider)
        return await self.run(request)

    async def run(self, request: ExtractionRequest) -> ExtractionResult:
        order = request.provider_order
        if not order:
            raise ValueError("No OCR providers are configured")
        attempts: list[ProviderAttempt] = []
        last_error: ProviderError | None = None

        for index, name in enumerate(order):
            provider = self._providers[name]
            try:
                text = await provider.extract(request.image_path)
            except ProviderError as exc:
                attempts.append(ProviderAttempt(provider=name, error=exc))
                last_error = exc
                next_name = order[index + 1] if index + 1 < len(order) else None
                if next_name is not None:
                    Log.warning(f"{name} OCR failed, falling back to {next_name}: {exc.cause}")
                else:
                    Log.warning(f"{name} OCR failed, no providers left: {exc.cause}")
                continue

            attempts.append(ProviderAttempt(provider=name, text=text))
            Log.info(f"OCR via {name}: {len(text)} chars")
            return ExtractionResult(raw_text=text, provider_used=name, attempts=attempts)

        raise AllProvidersExhaustedError(list(order), last_error) from last_error

    async def aclose(self) -> None:
        for provider in self._providers.values():
            await provider.aclose()
