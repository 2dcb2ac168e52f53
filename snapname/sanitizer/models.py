from dataclasses import dataclass
from enum import Enum


class MaskingLevel(str, Enum):
    """How aggressively PII is redacted."""

    BASIC = "basic"
    STRICT = "strict"

    @classmethod
    def parse(cls, value: str | None) -> "MaskingLevel":
        """Map a config string to a level; anything unrecognized is basic."""
        if value and value.strip().lower() == cls.STRICT.value:
            return cls.STRICT
        return cls.BASIC


@dataclass(frozen=True)
class SanitizedText:
    """Output of the sanitizer step."""

    text: str
    masking_applied: bool = False
    masking_level: MaskingLevel = MaskingLevel.BASIC
