"""
Core Exceptions

Custom exceptions for the storefront API.

Each exception carries the HTTP status the application maps it to.
Handlers are registered in storefront.main.create_app().
"""


class StorefrontError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str = "Internal error"):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(StorefrontError):
    """
    Raised when a request is malformed.

    Examples: unknown page key, an empty or non-https video playlist.
    """

    status_code = 400

    def __init__(self, message: str = "Invalid input", status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class StorageUnavailableError(StorefrontError):
    """
    Raised when the database cannot be reached.

    Not retried internally; the message shown to callers is generic.
    """

    status_code = 500

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message)


class UpstreamError(StorefrontError):
    """Raised when the POS/ordering platform cannot provide the client record."""

    status_code = 502

    def __init__(self, message: str = "Upstream request failed"):
        super().__init__(message)


class ConfigurationError(StorefrontError):
    """Raised when a required server setting (e.g. the admin password) is missing."""

    status_code = 500
