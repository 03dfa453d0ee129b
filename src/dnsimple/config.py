"""Client configuration objects.

Configuration is immutable: use ``dataclasses.replace`` to derive a new
``ClientConfig``. The base URI is normalized every time an instance is built,
so replacing it behaves like a setter.

Example:
    ```python
    from dataclasses import replace

    from dnsimple.config import ClientConfig

    config = ClientConfig(username="alice@example.com", api_token="s3cr3t")
    sandbox = replace(config, base_uri="https://api.sandbox.dnsimple.com/v1/")
    assert sandbox.base_uri == "https://api.sandbox.dnsimple.com/v1"
    ```
"""

from dataclasses import dataclass

API_BASE_URI = "https://api.dnsimple.com/v1/"

DEFAULT_TIMEOUT = 30.0


def normalize_base_uri(value: object) -> str:
    """Return ``value`` as a string without a trailing slash."""
    return str(value).removesuffix("/")


@dataclass(frozen=True)
class HttpProxy:
    """HTTP proxy address and port.

    A credentials file may set only ``proxy_port``; the address then
    defaults to ``localhost``.
    """

    addr: str | None = None
    port: int | str | None = None

    @property
    def url(self) -> str:
        """Proxy URL in the form httpx expects.

        ``addr`` defaults to ``localhost`` and to the ``http`` scheme; the
        port is left out when it is unset.
        """
        host = self.addr or "localhost"
        if "://" not in host:
            host = f"http://{host}"
        if self.port is None or self.port == "":
            return host
        return f"{host}:{self.port}"


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request a client makes.

    Attributes:
        username: Account email, used for Basic auth and in the token header.
        password: Account password. Takes precedence over ``api_token``.
        api_token: Account API token.
        base_uri: API base URI, always stored without a trailing slash.
        http_proxy: Optional proxy for every request.
        debug: Log each request and response exchanged with the API.
        timeout: Request timeout in seconds handed to httpx.
        credentials_loaded: Set once the credentials file has been applied.
    """

    username: str | None = None
    password: str | None = None
    api_token: str | None = None
    base_uri: str = API_BASE_URI
    http_proxy: HttpProxy | None = None
    debug: bool = False
    timeout: float | None = DEFAULT_TIMEOUT
    credentials_loaded: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_uri", normalize_base_uri(self.base_uri))

    @property
    def has_credentials(self) -> bool:
        """True when no credentials file lookup is needed."""
        if self.credentials_loaded:
            return True
        return bool(self.username and (self.password or self.api_token))

    def __repr__(self) -> str:
        # Never expose secrets through repr()
        return (
            f"ClientConfig(username={self.username!r}, "
            f"password={'***' if self.password else None}, "
            f"api_token={'***' if self.api_token else None}, "
            f"base_uri={self.base_uri!r}, http_proxy={self.http_proxy!r}, "
            f"debug={self.debug!r}, timeout={self.timeout!r}, "
            f"credentials_loaded={self.credentials_loaded!r})"
        )
