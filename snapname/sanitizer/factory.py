from snapname.config.settings import Settings
from snapname.sanitizer.base import BaseSanitizer
from snapname.sanitizer.models import MaskingLevel
from snapname.sanitizer.sanitizer import TextSanitizer


class SanitizerFactory:
    """Creates the configured text sanitizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseSanitizer:
        return TextSanitizer(
            masking_enabled=settings.pii_mask,
            masking_level=MaskingLevel.parse(settings.pii_mask_level),
        )
