import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from snapname.config.settings import Settings
from snapname.main import main
from snapname.processor.exceptions import RenameFailedError
from snapname.processor.models import RenameResult, UploadedImage


def _make_processor(result: RenameResult | None = None, error: Exception | None = None) -> MagicMock:
    processor = MagicMock()
    processor.process = AsyncMock(return_value=result, side_effect=error)
    processor.aclose = AsyncMock()
    return processor


class TestMain:
    def test_prints_result_json(
        self, fake_image: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = RenameResult(
            suggested_name="Invoice_123_2025-03-04_05-06.png",
            timestamp="2025-03-04_05-06",
            timezone="local",
            ocr_provider="tesseract",
            ocr_preview="Invoice #123",
            saved_at=Path("out/Invoice_123_2025-03-04_05-06.png"),
        )
        processor = _make_processor(result=result)
        with patch("snapname.main.Log"), patch(
            "snapname.main.build_processor", return_value=processor
        ):
            code = main([str(fake_image), "--original-name", "shot.png"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == result.to_dict()
        processor.process.assert_awaited_once_with(
            UploadedImage(path=fake_image, original_name="shot.png")
        )
        processor.aclose.assert_awaited_once()

    def test_failure_prints_generic_error(
        self, fake_image: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        processor = _make_processor(error=RenameFailedError())
        with patch("snapname.main.Log"), patch(
            "snapname.main.build_processor", return_value=processor
        ):
            code = main([str(fake_image)])

        assert code == 1
        assert json.loads(capsys.readouterr().out.strip().splitlines()[-1]) == {
            "error": "Failed to process image"
        }
        processor.aclose.assert_awaited_once()

    def test_invalid_configuration_prints_generic_error(
        self,
        fake_image: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("OCR_PROVIDER", "paddle")
        with patch("snapname.main.Log") as log, patch(
            "snapname.main.Settings",
            side_effect=lambda: Settings(_env_file=None),
        ):
            code = main([str(fake_image)])

        assert code == 1
        assert json.loads(capsys.readouterr().out) == {"error": "Failed to process image"}
        assert "paddle" in log.error.call_args.args[0]
        assert fake_image.exists()
