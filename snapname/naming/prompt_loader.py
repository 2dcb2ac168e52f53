from pathlib import Path

from snapname.naming.exceptions import NamingError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the filename prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled filename_prompt.txt.

    Returns:
        The raw template string with an ``{ocr_text}`` placeholder.

    Raises:
        NamingError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "filename_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise NamingError(f"Failed to load prompt template: {exc}") from exc
