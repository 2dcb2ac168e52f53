"""Whitespace normalization and regex-based PII masking for OCR text.

Processing flow:
1. Replace carriage returns and tabs with spaces.
2. Collapse every run of non-newline whitespace to a single space, trim.
3. If masking is enabled, redact in order:
   a. email addresses -> [email]
   b. phone numbers   -> [phone]
   c. strict only: 13-19 digit card-like numbers -> [number]

Masking is best effort. Missed PII is possible; over-masking is preferred
to under-masking.
"""

from __future__ import annotations

import re
from typing import ClassVar

from snapname.logging.logger import Log
from snapname.sanitizer.base import BaseSanitizer
from snapname.sanitizer.models import MaskingLevel, SanitizedText


class TextSanitizer(BaseSanitizer):
    """Deterministic sanitizer for OCR output."""

    EMAIL_PLACEHOLDER: ClassVar[str] = "[email]"
    PHONE_PLACEHOLDER: ClassVar[str] = "[phone]"
    NUMBER_PLACEHOLDER: ClassVar[str] = "[number]"

    _CONTROL_WS_RE: ClassVar[re.Pattern[str]] = re.compile(r"[\r\t]")
    _INLINE_WS_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\S\r\n]+")

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b",
        re.IGNORECASE,
    )
    # Optional country code, optional (0xx) area code, 3-4 digit exchange, 4-digit line.
    _PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(\+?\d{1,3}[-.\s]?)?(\(?0\d{1,2}\)?[-.\s]?)?\d{3,4}[-.\s]?\d{4}\b",
    )
    _CARDISH_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:\d[ -]*?){13,19}\b",
    )

    def __init__(
        self,
        *,
        masking_enabled: bool = False,
        masking_level: MaskingLevel = MaskingLevel.BASIC,
    ) -> None:
        self._masking_enabled = masking_enabled
        self._masking_level = masking_level

    def sanitize(self, text: str | None) -> SanitizedText:
        cleaned = self.normalize(text)
        if not self._masking_enabled:
            return SanitizedText(text=cleaned, masking_level=self._masking_level)

        masked = self.mask_pii(cleaned, self._masking_level)
        if masked != cleaned:
            Log.info(f"PII masking ({self._masking_level.value}) redacted content")
        return SanitizedText(
            text=masked,
            masking_applied=True,
            masking_level=self._masking_level,
        )

    @classmethod
    def normalize(cls, text: str | None) -> str:
        """Collapse inline whitespace, drop CR/TAB, trim. Newlines are kept."""
        if not text:
            return ""
        out = cls._CONTROL_WS_RE.sub(" ", str(text))
        out = cls._INLINE_WS_RE.sub(" ", out)
        return out.strip()

    @classmethod
    def mask_pii(cls, text: str | None, level: MaskingLevel = MaskingLevel.BASIC) -> str:
        """Replace email, phone and (strict) card-like numbers with placeholders."""
        if not text:
            return ""
        out = cls._EMAIL_RE.sub(cls.EMAIL_PLACEHOLDER, text)
        out = cls._PHONE_RE.sub(cls.PHONE_PLACEHOLDER, out)
        if level == MaskingLevel.STRICT:
            out = cls._CARDISH_RE.sub(cls.NUMBER_PLACEHOLDER, out)
        return out
