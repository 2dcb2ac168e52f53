from snapname.config.settings import Settings
from snapname.logging.logger import Log
from snapname.naming.client_base import BaseNamingClient
from snapname.naming.deriver import FilenameDeriver
from snapname.naming.openai_client_adapter import OpenAIClientAdapter


class FilenameDeriverFactory:
    """Creates the filename deriver, with a model client when one is configured."""

    SUPPORTED_PROVIDERS = ("openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> FilenameDeriver:
        client = cls._create_client(settings)
        if client is None:
            Log.info("No language model configured; using heuristic filenames")
        return FilenameDeriver(
            client=client,
            model=settings.openai_model_name,
            temperature=settings.openai_temperature,
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseNamingClient | None:
        provider = settings.naming_provider.lower()
        if provider not in cls.SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unknown naming provider '{provider}'. "
                f"Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
            )
        if not settings.openai_api_key:
            return None
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "openai_compatible_base_url is required for naming_provider=openai_compatible"
            )
        return url
