"""Azure AI Vision Read adapter (submit, then poll the operation)."""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, ClassVar

import httpx

from snapname.logging.logger import Log
from snapname.ocr.base import BaseOcrProvider
from snapname.ocr.exceptions import ProviderCallError, ProviderUnavailableError


class AzureReadAdapter(BaseOcrProvider):
    """Extracts text with the Azure Read API.

    The image is submitted once; the returned Operation-Location is polled
    every ``poll_interval`` seconds, at most ``max_attempts`` times, until the
    operation reports a terminal status or result content shows up.
    """

    name: ClassVar[str] = "azure"

    ANALYZE_PATH: ClassVar[str] = "/vision/v3.2/read/analyze"
    TERMINAL_STATUSES: ClassVar[frozenset[str]] = frozenset({"succeeded", "failed"})

    def __init__(
        self,
        *,
        endpoint: str,
        api_key: str,
        poll_interval: float = 0.8,
        max_attempts: int = 15,
        timeout_seconds: float = 30,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._api_key = api_key
        self._poll_interval = poll_interval
        self._max_attempts = max_attempts
        self._timeout_seconds = timeout_seconds
        self._client = http_client
        self._sleep = sleep

    async def extract(self, image_path: Path) -> str:
        if not self._endpoint or not self._api_key:
            raise ProviderUnavailableError(self.name, "Azure Vision credentials missing")

        client = self._get_client()
        operation_url = await self._submit(client, image_path)
        result = await self._poll(client, operation_url)
        return "\n".join(self._collect_lines(result)).strip()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self._client

    async def _submit(self, client: httpx.AsyncClient, image_path: Path) -> str:
        try:
            image_bytes = image_path.read_bytes()
        except OSError as exc:
            raise ProviderCallError(self.name, f"cannot read image: {exc}") from exc

        try:
            resp = await client.post(
                f"{self._endpoint}{self.ANALYZE_PATH}",
                headers={
                    "Ocp-Apim-Subscription-Key": self._api_key,
                    "Content-Type": "application/octet-stream",
                },
                content=image_bytes,
            )
        except httpx.HTTPError as exc:
            raise ProviderCallError(self.name, f"analyze request failed: {exc}") from exc

        if not resp.is_success:
            raise ProviderCallError(
                self.name, f"Azure analyze error: {resp.status_code} {resp.text}"
            )
        operation_url = resp.headers.get("operation-location")
        if not operation_url:
            raise ProviderCallError(self.name, "Azure: missing operation-location")
        return operation_url

    async def _poll(self, client: httpx.AsyncClient, operation_url: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attempt in range(1, self._max_attempts + 1):
            await self._sleep(self._poll_interval)
            try:
                resp = await client.get(
                    operation_url,
                    headers={"Ocp-Apim-Subscription-Key": self._api_key},
                )
                payload = resp.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise ProviderCallError(self.name, f"poll request failed: {exc}") from exc

            if not isinstance(payload, dict):
                raise ProviderCallError(self.name, "poll response is not a JSON object")
            result = payload

            status = self._status_of(result)
            Log.debug(f"Azure poll {attempt}/{self._max_attempts}: status={status or 'n/a'}")
            if status in self.TERMINAL_STATUSES or result.get("analyzeResult"):
                break
        return result

    @staticmethod
    def _status_of(result: dict[str, Any]) -> str:
        status = result.get("status")
        if not status and isinstance(result.get("analyzeResult"), dict):
            status = result["analyzeResult"].get("status")
        return str(status or "").lower()

    @classmethod
    def _collect_lines(cls, result: dict[str, Any]) -> list[str]:
        """Flatten page lines in document order.

        Handles the v3.x ``readResults[].lines[].text`` shape and the newer
        ``pages[].lines[].content`` shape.

        Raises:
            ProviderCallError: if a page, line or line text has the wrong type.
        """
        analyze = result.get("analyzeResult") or result
        if not isinstance(analyze, dict):
            raise ProviderCallError(
                cls.name, "malformed read result: analyzeResult is not an object"
            )

        read_results = analyze.get("readResults")
        if read_results is None and isinstance(analyze.get("analyzeResult"), dict):
            read_results = analyze["analyzeResult"].get("readResults")

        if isinstance(read_results, list):
            pages, key = read_results, "text"
        elif isinstance(analyze.get("pages"), list):
            pages, key = analyze["pages"], "content"
        else:
            return []

        lines: list[str] = []
        try:
            for page in pages:
                for line in page.get("lines") or []:
                    value = line.get(key)
                    if not value:
                        continue
                    if not isinstance(value, str):
                        raise TypeError(f"line {key} is {type(value).__name__}, not str")
                    lines.append(value)
        except (AttributeError, TypeError) as exc:
            raise ProviderCallError(cls.name, f"malformed read result: {exc}") from exc
        return lines
