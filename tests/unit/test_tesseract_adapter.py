from pathlib import Path
from unittest.mock import patch

import pytest
import pytesseract

from snapname.ocr.tesseract_adapter import TesseractAdapter


class TestTesseractAdapter:
    @pytest.mark.asyncio
    async def test_returns_trimmed_text(self, sample_png: Path) -> None:
        with patch(
            "snapname.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="  Invoice 123 \n\x0c",
        ) as recognize:
            text = await TesseractAdapter().extract(sample_png)

        assert text == "Invoice 123"
        assert recognize.call_args.kwargs == {"lang": "eng", "config": "--oem 1 --psm 3"}

    @pytest.mark.asyncio
    async def test_uses_configured_language_and_modes(self, sample_png: Path) -> None:
        with patch(
            "snapname.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="x",
        ) as recognize:
            await TesseractAdapter(lang="kor+eng", oem=3, psm=6).extract(sample_png)

        assert recognize.call_args.kwargs == {"lang": "kor+eng", "config": "--oem 3 --psm 6"}

    @pytest.mark.asyncio
    async def test_engine_failure_returns_empty(self, sample_png: Path) -> None:
        with patch(
            "snapname.ocr.tesseract_adapter.pytesseract.image_to_string",
            side_effect=pytesseract.TesseractNotFoundError(),
        ):
            assert await TesseractAdapter().extract(sample_png) == ""

    @pytest.mark.asyncio
    async def test_unreadable_image_returns_empty(self, tmp_path: Path) -> None:
        assert await TesseractAdapter().extract(tmp_path / "missing.png") == ""
