import httpx
import openai

from snapname.naming.client_base import BaseNamingClient
from snapname.naming.exceptions import NamingError, NamingNetworkError


class OpenAIClientAdapter(BaseNamingClient):
    """Naming client adapter built on the OpenAI-compatible async chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise NamingNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise NamingNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise NamingError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise NamingError("AI returned empty response")
        return content
