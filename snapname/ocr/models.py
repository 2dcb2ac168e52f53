from dataclasses import dataclass, field
from pathlib import Path

from snapname.ocr.exceptions import ProviderError


@dataclass(frozen=True)
class ExtractionRequest:
    """One image and the order in which providers will be tried."""

    image_path: Path
    provider_order: tuple[str, ...]


@dataclass(frozen=True)
class ProviderAttempt:
    """Outcome of a single provider call: either text or an error."""

    provider: str
    text: str | None = None
    error: ProviderError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class ExtractionResult:
    """Output of the fallback orchestrator."""

    raw_text: str
    provider_used: str
    succeeded: bool = True
    attempts: list[ProviderAttempt] = field(default_factory=list)
