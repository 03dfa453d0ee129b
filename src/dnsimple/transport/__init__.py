"""HTTP transport for the DNSimple client.

The network call itself is delegated to httpx. This package only configures
it: proxy, timeout, user agent, and request/response logging in debug mode.
Retries, pooling and TLS are left to httpx.

Example:
    ```python
    from dnsimple.config import ClientConfig
    from dnsimple.transport import create_http_client

    with create_http_client(ClientConfig(debug=True)) as http:
        http.get("https://api.dnsimple.com/v1/whoami")
    ```
"""

from dnsimple.transport.factory import USER_AGENT, create_http_client

__all__ = ["USER_AGENT", "create_http_client"]
