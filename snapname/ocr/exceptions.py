class OcrError(Exception):
    """Base exception for OCR extraction."""


class ProviderError(OcrError):
    """Raised when a single OCR provider fails to extract text."""

    def __init__(self, provider: str, cause: str) -> None:
        super().__init__(f"{provider}: {cause}")
        self.provider = provider
        self.cause = cause


class ProviderUnavailableError(ProviderError):
    """Raised when a provider is missing credentials or configuration."""


class ProviderCallError(ProviderError):
    """Raised when a provider call fails (network, HTTP status, bad response)."""


class AllProvidersExhaustedError(OcrError):
    """Raised when every provider in the fallback chain has failed."""

    def __init__(self, tried: list[str], last_error: ProviderError | None) -> None:
        super().__init__(
            f"All OCR providers failed ({', '.join(tried)}); last error: {last_error}"
        )
        self.tried = tried
        self.last_error = last_error
