"""DNSimple - Python client for the DNSimple domain and DNS hosting API.

This library provides:
- Credential resolution from settings, environment and ``~/.dnsimple``
- Basic or token header authentication chosen per request
- Typed records and response envelopes
- A generic helper that fetches every page of a list endpoint

Example:
    ```python
    from dnsimple import WILDCARD_ACCOUNT, Client

    client = Client(username="alice@example.com", api_token="s3cr3t")
    transfer = client.registrar.domain_transfer(WILDCARD_ACCOUNT, "example.com", 42).data
    print(transfer.state)
    ```
"""

__version__ = "0.1.0"

from dnsimple.client import Client  # noqa: E402
from dnsimple.config import ClientConfig, HttpProxy  # noqa: E402
from dnsimple.errors import (  # noqa: E402
    AuthenticationError,
    ConfigurationError,
    CredentialFileError,
    DnsimpleError,
    NotFoundError,
    RequestError,
    ValidationError,
)
from dnsimple.pagination import paginate  # noqa: E402
from dnsimple.response import CollectionResponse, PaginatedResponse, Response  # noqa: E402
from dnsimple.services import WILDCARD_ACCOUNT  # noqa: E402

__all__ = [
    "WILDCARD_ACCOUNT",
    "AuthenticationError",
    "Client",
    "ClientConfig",
    "CollectionResponse",
    "ConfigurationError",
    "CredentialFileError",
    "DnsimpleError",
    "HttpProxy",
    "NotFoundError",
    "PaginatedResponse",
    "RequestError",
    "Response",
    "ValidationError",
    "__version__",
    "paginate",
]
