"""Error taxonomy and HTTP status mapping for the DNSimple client."""

from dnsimple.errors.exceptions import (
    AuthenticationError,
    ConfigurationError,
    CredentialFileError,
    DnsimpleError,
    NotFoundError,
    RequestError,
    ValidationError,
)
from dnsimple.errors.handler import raise_for_status
from dnsimple.errors.models import ErrorDetail

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "CredentialFileError",
    "DnsimpleError",
    "ErrorDetail",
    "NotFoundError",
    "RequestError",
    "ValidationError",
    "raise_for_status",
]
