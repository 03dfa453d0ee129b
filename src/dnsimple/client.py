"""DNSimple API client.

Example:
    ```python
    from dnsimple import WILDCARD_ACCOUNT, Client

    with Client(username="alice@example.com", api_token="s3cr3t") as client:
        for record in client.zones.all_records(WILDCARD_ACCOUNT, "example.com"):
            print(record.type, record.name, record.content)
    ```

When neither a password nor an API token is given, the first request loads
the credentials file (see ``dnsimple.auth.credentials``).
"""

import logging
from dataclasses import replace
from threading import Lock
from typing import Any

import httpx

from dnsimple.auth.credentials import CredentialResolver
from dnsimple.auth.options import merge_options, standard_options
from dnsimple.config import ClientConfig
from dnsimple.errors.exceptions import AuthenticationError
from dnsimple.errors.handler import raise_for_status
from dnsimple.errors.models import ErrorDetail
from dnsimple.services import RegistrarService, ZonesService
from dnsimple.transport.factory import create_http_client

logger = logging.getLogger(__name__)

# Option name -> httpx.Client.request keyword
REQUEST_OPTIONS = {
    "headers": "headers",
    "auth": "auth",
    "query": "params",
    "json": "json",
    "timeout": "timeout",
}

# Options a caller may pass; ``auth`` only comes from standard_options
CALLER_OPTIONS = frozenset({"headers", "query", "json", "timeout"})


def _check_caller_options(options: dict[str, Any] | None) -> None:
    for key in options or {}:
        if key not in CALLER_OPTIONS:
            raise ValueError(f"Unsupported request option: {key!r}")


def _request_kwargs(options: dict[str, Any]) -> dict[str, Any]:
    return {REQUEST_OPTIONS[key]: value for key, value in options.items()}


class Client:
    """Synchronous DNSimple API client.

    Args:
        config: Client configuration. Keyword settings are applied on top.
        resolver: Credential resolver used to load the credentials file.
        transport: httpx transport, e.g. ``httpx.MockTransport`` in tests.
        **settings: ``ClientConfig`` fields such as ``username`` or
            ``api_token``.

    Attributes:
        zones: Zone and zone record endpoints.
        registrar: Domain transfer endpoints.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        resolver: CredentialResolver | None = None,
        transport: httpx.BaseTransport | None = None,
        **settings: Any,
    ):
        if config is None:
            config = ClientConfig(**settings)
        elif settings:
            config = replace(config, **settings)

        self._config = config
        self._config_lock = Lock()
        self._resolver = resolver or CredentialResolver()
        self._transport = transport
        self._http: httpx.Client | None = None

        self.zones = ZonesService(self)
        self.registrar = RegistrarService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def load_credentials_if_necessary(self) -> ClientConfig:
        """Apply the credentials file once, unless credentials are already set.

        Can be called eagerly at startup; requests call it otherwise.

        Raises:
            CredentialFileError: If the credentials file cannot be read.
        """
        if self._config.has_credentials:
            return self._config

        with self._config_lock:
            # Another thread may have loaded them while we waited
            if not self._config.has_credentials:
                self._config = self._resolver.load_credentials_if_necessary(self._config)
        return self._config

    def _http_client(self) -> httpx.Client:
        # Built on first use so a proxy from the credentials file applies
        if self._http is None:
            with self._config_lock:
                if self._http is None:
                    self._http = create_http_client(self._config, self._transport)
        return self._http

    def request(self, method: str, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        """Send a request to ``base_uri + path``.

        Args:
            method: HTTP verb.
            path: Resource path, starting with ``/``.
            options: Per-call options (``headers``, ``query``, ``json``,
                ``timeout``), merged on top of the standard options.

        Returns:
            The raw httpx response.

        Raises:
            ConfigurationError: If no password or API token is available.
            AuthenticationError: On 401, whatever the body says.
            RequestError: On any other non-2xx response.
        """
        _check_caller_options(options)
        config = self.load_credentials_if_necessary()

        base = standard_options(config)
        base.pop("proxy", None)  # bound to the httpx client
        kwargs = _request_kwargs(merge_options(base, options))

        url = f"{config.base_uri}{path}"
        logger.debug(f"{method.upper()} {url}")
        response = self._http_client().request(method.upper(), url, **kwargs)

        if response.status_code == 401:
            error_detail = ErrorDetail.from_response(response)
            message = "Authentication failed"
            if error_detail and error_detail.message:
                message = f"{message}: {error_detail.message}"
            raise AuthenticationError(message, status_code=401, response=response, error_detail=error_detail)

        raise_for_status(response)
        return response

    def get(self, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("GET", path, options)

    def post(self, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("POST", path, options)

    def put(self, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("PUT", path, options)

    def patch(self, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("PATCH", path, options)

    def delete(self, path: str, options: dict[str, Any] | None = None) -> httpx.Response:
        return self.request("DELETE", path, options)

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
