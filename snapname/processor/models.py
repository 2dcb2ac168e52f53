from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedImage:
    """An uploaded image already written to a temporary path."""

    path: Path
    original_name: str | None = None


@dataclass(frozen=True)
class RenameResult:
    """Outcome of a successful rename request."""

    suggested_name: str
    timestamp: str
    timezone: str
    ocr_provider: str
    ocr_preview: str
    saved_at: Path

    def to_dict(self) -> dict[str, str]:
        return {
            "suggestedName": self.suggested_name,
            "timestamp": self.timestamp,
            "timezone": self.timezone,
            "ocrProvider": self.ocr_provider,
            "ocrPreview": self.ocr_preview,
            "savedAt": str(self.saved_at),
        }
