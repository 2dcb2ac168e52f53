from abc import ABC, abstractmethod

from snapname.sanitizer.models import SanitizedText


class BaseSanitizer(ABC):
    """Contract for all text sanitizers."""

    @abstractmethod
    def sanitize(self, text: str | None) -> SanitizedText:
        """Clean raw OCR text and optionally redact PII.

        Args:
            text: Raw text returned by an OCR provider. May be empty.

        Returns:
            SanitizedText with the cleaned text and the masking that was applied.
        """
