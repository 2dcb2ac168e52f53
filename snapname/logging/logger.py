import logging
import sys
from typing import ClassVar


class Log:
    """Centralized logging for the rename pipeline."""

    _logger: logging.Logger = logging.getLogger("snapname")

    # HTTP clients log every Azure poll and model call at INFO.
    _QUIET_LOGGERS: ClassVar[tuple[str, ...]] = ("httpx", "httpcore", "openai")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach one stdout handler, quiet the HTTP clients."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in cls._QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
