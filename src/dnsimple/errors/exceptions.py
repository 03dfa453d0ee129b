"""Exceptions raised by the DNSimple client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from dnsimple.errors.models import ErrorDetail


class DnsimpleError(Exception):
    """Base exception for every error raised by this library."""

    pass


class ConfigurationError(DnsimpleError):
    """The client cannot build a request from its configuration.

    Raised when neither a password nor an API token is available at request
    time, and (through ``CredentialFileError``) when the credentials file
    cannot be read.
    """

    pass


class CredentialFileError(ConfigurationError):
    """Raised when the credentials file cannot be located or parsed.

    Attributes:
        path: The path that was being read, if known.

    Example:
        ```python
        try:
            config = resolver.load_credentials(config)
        except CredentialFileError as e:
            print(f"Cannot read {e.path}: {e}")
        ```
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class RequestError(DnsimpleError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_detail = error_detail


class AuthenticationError(RequestError):
    """401 Unauthorized."""

    pass


class NotFoundError(RequestError):
    """404 Not Found."""

    pass


class ValidationError(RequestError):
    """400 or 422, the server rejected the submitted attributes."""

    def __init__(self, message: str, errors: dict | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors if errors is not None else {}
