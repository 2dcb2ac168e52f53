from pathlib import Path

import pytest
from PIL import Image, ImageDraw


@pytest.fixture()
def sample_png(tmp_path: Path) -> Path:
    """Write a small PNG with a line of dark text-like pixels."""
    path = tmp_path / "upload" / "Screenshot 2025-01-01.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    image = Image.new("RGB", (200, 60), color="white")
    ImageDraw.Draw(image).text((10, 20), "Invoice 123", fill="black")
    image.save(path)
    return path


@pytest.fixture()
def fake_image(tmp_path: Path) -> Path:
    """Write arbitrary bytes standing in for an uploaded image."""
    path = tmp_path / "upload.bin"
    path.write_bytes(b"\x89PNG fake image bytes")
    return path
