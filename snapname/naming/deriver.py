"""Filename core derivation: language model first, first-line heuristic second."""

import re
from pathlib import Path

from snapname.logging.logger import Log
from snapname.naming.client_base import BaseNamingClient
from snapname.naming.exceptions import NamingError
from snapname.naming.models import CoreSource, FilenameCore
from snapname.naming.prompt_loader import load_prompt_template

FALLBACK_CORE = "screenshot"
MAX_CORE_LENGTH = 30

_FORBIDDEN_RE = re.compile(r'[:?*/\\|"<>.]')
_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_]")
_UNDERSCORE_RUN_RE = re.compile(r"_+")


def clean_core(value: str) -> str:
    """Strip forbidden punctuation and turn whitespace runs into underscores."""
    value = _FORBIDDEN_RE.sub("", value)
    return _WHITESPACE_RE.sub("_", value.strip())


def restrict_to_word_chars(value: str) -> str:
    """Keep ASCII letters, digits and single underscores only."""
    value = _NON_WORD_RE.sub("", value)
    return _UNDERSCORE_RUN_RE.sub("_", value).strip("_")


class FilenameDeriver:
    """Turns sanitized OCR text into a short, ASCII-safe filename core."""

    def __init__(
        self,
        *,
        client: BaseNamingClient | None = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._prompt_template = (
            load_prompt_template(prompt_template_path) if client is not None else ""
        )

    async def derive_core(self, text: str) -> FilenameCore:
        """Return a non-empty core made of ``[A-Za-z0-9_]``, at most 30 chars."""
        if self._client is not None:
            core = await self._from_llm(self._client, text)
            if core:
                return FilenameCore(value=core, source=CoreSource.LLM)
        return FilenameCore(value=self.heuristic_core(text), source=CoreSource.HEURISTIC)

    async def _from_llm(self, client: BaseNamingClient, text: str) -> str:
        prompt = self._prompt_template.format(ocr_text=text)
        Log.debug(f"Filename prompt:\n{prompt}")
        try:
            reply = await client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                user_prompt=prompt,
            )
        except NamingError as exc:
            Log.error(f"OpenAI error: {exc}")
            return ""
        Log.debug(f"AI raw response:\n{reply}")

        lines = reply.splitlines()
        first_line = lines[0].strip() if lines else ""
        core = restrict_to_word_chars(clean_core(first_line))
        return core[:MAX_CORE_LENGTH].rstrip("_")

    @staticmethod
    def heuristic_core(text: str) -> str:
        """Derive a core from the first non-empty line; ASCII only."""
        first_line = next(
            (line for line in (text or "").split("\n") if line.strip()),
            FALLBACK_CORE,
        )
        core = clean_core(first_line[:MAX_CORE_LENGTH])
        if not core or not core.isascii():
            return FALLBACK_CORE
        return restrict_to_word_chars(core) or FALLBACK_CORE
