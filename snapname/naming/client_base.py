from abc import ABC, abstractmethod


class BaseNamingClient(ABC):
    """Contract for provider-specific language model clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text."""
