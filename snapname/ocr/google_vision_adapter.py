import asyncio
from pathlib import Path
from typing import Any, ClassVar

from google.api_core import exceptions as gexc
from google.auth import exceptions as auth_exc
from google.cloud import vision

from snapname.ocr.base import BaseOcrProvider
from snapname.ocr.exceptions import ProviderCallError, ProviderUnavailableError


class GoogleVisionAdapter(BaseOcrProvider):
    """Extracts text with Google Cloud Vision text detection.

    The SDK client is blocking, so calls run in a worker thread. The client is
    built on first use and reused afterwards.
    """

    name: ClassVar[str] = "google"

    def __init__(self, client: Any | None = None) -> None:
        self._client = client

    async def extract(self, image_path: Path) -> str:
        client = self._get_client()
        try:
            content = image_path.read_bytes()
        except OSError as exc:
            raise ProviderCallError(self.name, f"cannot read image: {exc}") from exc

        try:
            response = await asyncio.to_thread(
                client.text_detection, image=vision.Image(content=content)
            )
        except gexc.GoogleAPIError as exc:
            raise ProviderCallError(self.name, f"text detection failed: {exc}") from exc

        if response.error.message:
            raise ProviderCallError(self.name, response.error.message)

        annotations = response.text_annotations
        full_text = annotations[0].description if annotations else ""
        return (full_text or "").strip()

    def _get_client(self) -> Any:
        if self._client is None:
            try:
                self._client = vision.ImageAnnotatorClient()
            except auth_exc.GoogleAuthError as exc:
                raise ProviderUnavailableError(
                    self.name, f"Google Vision credentials missing: {exc}"
                ) from exc
        return self._client
