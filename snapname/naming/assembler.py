import re
from datetime import datetime, timezone
from pathlib import PurePath

from snapname.naming.models import FinalFilename

DEFAULT_EXTENSION = ".png"

_UNDERSCORE_RUN_RE = re.compile(r"_+")


def build_timestamp(now: datetime | None = None, *, use_utc: bool = False) -> str:
    """Format ``now`` as YYYY-MM-DD_HH-mm in local time or UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    if use_utc:
        moment = now.astimezone(timezone.utc) if now.tzinfo else now
    else:
        moment = now.astimezone() if now.tzinfo else now
    return moment.strftime("%Y-%m-%d_%H-%M")


def resolve_extension(original_name: str | None) -> str:
    """Return the upload's extension (with dot), or .png when it has none."""
    suffix = PurePath(original_name).suffix if original_name else ""
    return suffix or DEFAULT_EXTENSION


def assemble(core: str, timestamp: str, extension: str = DEFAULT_EXTENSION) -> FinalFilename:
    """Join core, timestamp and extension; collapse underscore runs."""
    value = _UNDERSCORE_RUN_RE.sub("_", f"{core}_{timestamp}{extension}")
    return FinalFilename(value=value, timestamp=timestamp, extension=extension)
