"""Domain errors raised by services and adapters."""


class UserDirectoryError(Exception):
    """Base class for errors surfaced to API clients."""


class ResourceNotFoundError(UserDirectoryError):
    """Raised when a requested record does not exist."""


class DuplicateResourceError(UserDirectoryError):
    """Raised when a write would break a uniqueness constraint."""


class ValidationFailedError(UserDirectoryError):
    """Raised when input breaks a field constraint."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Invalid input data")
        self.errors = errors


class UpstreamError(UserDirectoryError):
    """Raised when the external user API fails or times out."""
