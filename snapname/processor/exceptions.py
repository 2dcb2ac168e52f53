class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class PersistenceError(ProcessorError):
    """Raised when the renamed file cannot be written to its destination."""


class RenameFailedError(ProcessorError):
    """Generic request-level failure; details are logged, not exposed."""

    def __init__(self, message: str = "Failed to process image") -> None:
        super().__init__(message)
