class NamingError(Exception):
    """Raised when the language model cannot produce a filename core."""


class NamingNetworkError(NamingError):
    """Raised when the model provider call fails due to network/infrastructure issues."""
