from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    ocr_provider: str = "azure"
    ocr_enabled_providers: Annotated[list[str], NoDecode] = [
        "azure",
        "google",
        "tesseract",
    ]

    pii_mask: bool = False
    pii_mask_level: str = "basic"

    timezone: str = "local"

    azure_vision_endpoint: str = ""
    azure_vision_key: str = ""
    azure_poll_interval_seconds: float = 0.8
    azure_poll_max_attempts: int = 15
    azure_timeout_seconds: int = 30

    tesseract_lang: str = "eng"
    tesseract_oem: int = 1
    tesseract_psm: int = 3

    naming_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_temperature: float = 0.2
    openai_timeout_seconds: int = 30
    openai_compatible_base_url: str = ""

    output_dir: str = "out"
    preview_chars: int = 800

    @field_validator("ocr_enabled_providers", mode="before")
    @classmethod
    def _split_providers(cls, value: object) -> object:
        if isinstance(value, str):
            return [part.strip().lower() for part in value.split(",") if part.strip()]
        return value

    @property
    def use_utc(self) -> bool:
        return self.timezone.lower() == "utc"
