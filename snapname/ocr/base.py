from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar


class BaseOcrProvider(ABC):
    """Contract for all OCR provider adapters."""

    name: ClassVar[str]

    @abstractmethod
    async def extract(self, image_path: Path) -> str:
        """Extract plain text from an image file.

        Args:
            image_path: Path to the uploaded image on local disk.

        Returns:
            Extracted text, trimmed. May be empty when the image has no text.

        Raises:
            ProviderUnavailableError: if credentials or configuration are missing.
            ProviderCallError: if the provider call fails.
        """

    async def aclose(self) -> None:
        """Release any connection owned by the adapter."""
