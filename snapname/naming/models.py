from dataclasses import dataclass
from enum import Enum


class CoreSource(str, Enum):
    """Which path produced a filename core."""

    LLM = "llm"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class FilenameCore:
    """Descriptive, timestamp-free part of a generated filename."""

    value: str
    source: CoreSource


@dataclass(frozen=True)
class FinalFilename:
    """Complete generated filename and its parts."""

    value: str
    timestamp: str
    extension: str
