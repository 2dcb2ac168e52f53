import pytest
from pydantic import ValidationError

from snapname.config.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OCR_PROVIDER",
        "OCR_ENABLED_PROVIDERS",
        "PII_MASK",
        "PII_MASK_LEVEL",
        "TIMEZONE",
        "AZURE_POLL_MAX_ATTEMPTS",
        "OPENAI_API_KEY",
        "OPENAI_MODEL_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_default_ocr_provider(self) -> None:
        s = Settings(_env_file=None)
        assert s.ocr_provider == "azure"

    def test_default_enabled_providers(self) -> None:
        s = Settings(_env_file=None)
        assert s.ocr_enabled_providers == ["azure", "google", "tesseract"]

    def test_masking_disabled_by_default(self) -> None:
        s = Settings(_env_file=None)
        assert s.pii_mask is False
        assert s.pii_mask_level == "basic"

    def test_default_poll_policy(self) -> None:
        s = Settings(_env_file=None)
        assert s.azure_poll_interval_seconds == 0.8
        assert s.azure_poll_max_attempts == 15

    def test_default_model(self) -> None:
        s = Settings(_env_file=None)
        assert s.openai_model_name == "gpt-4o-mini"
        assert s.openai_api_key == ""

    def test_local_time_by_default(self) -> None:
        s = Settings(_env_file=None)
        assert s.use_utc is False


class TestSettingsFromEnv:
    def test_loads_ocr_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_PROVIDER", "google")
        s = Settings(_env_file=None)
        assert s.ocr_provider == "google"

    def test_splits_enabled_providers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_ENABLED_PROVIDERS", "Google, tesseract")
        s = Settings(_env_file=None)
        assert s.ocr_enabled_providers == ["google", "tesseract"]

    def test_loads_pii_mask(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PII_MASK", "true")
        monkeypatch.setenv("PII_MASK_LEVEL", "strict")
        s = Settings(_env_file=None)
        assert s.pii_mask is True
        assert s.pii_mask_level == "strict"

    def test_utc_timezone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMEZONE", "UTC")
        s = Settings(_env_file=None)
        assert s.use_utc is True


class TestSettingsValidation:
    def test_invalid_poll_attempts_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_POLL_MAX_ATTEMPTS", "abc")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
