import asyncio
from pathlib import Path
from typing import ClassVar

import pytesseract
from PIL import Image

from snapname.logging.logger import Log
from snapname.ocr.base import BaseOcrProvider


class TesseractAdapter(BaseOcrProvider):
    """Extracts text with a local Tesseract install.

    Never raises: any recognition failure is logged and yields an empty
    string so the fallback chain always has a terminal answer.
    """

    name: ClassVar[str] = "tesseract"

    def __init__(self, *, lang: str = "eng", oem: int = 1, psm: int = 3) -> None:
        self._lang = lang
        self._config = f"--oem {oem} --psm {psm}"

    async def extract(self, image_path: Path) -> str:
        try:
            text = await asyncio.to_thread(self._recognize, image_path)
        except Exception as exc:
            Log.error(f"Tesseract error: {exc}")
            return ""
        return (text or "").strip()

    def _recognize(self, image_path: Path) -> str:
        with Image.open(image_path) as image:
            return pytesseract.image_to_string(image, lang=self._lang, config=self._config)
