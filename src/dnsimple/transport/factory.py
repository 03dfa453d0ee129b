"""Build the httpx client used by ``dnsimple.client.Client``."""

import logging

import httpx

from dnsimple import __version__
from dnsimple.config import ClientConfig

logger = logging.getLogger(__name__)

USER_AGENT = f"dnsimple-python/{__version__}"


def _log_request(request: httpx.Request) -> None:
    logger.info(f"Request: {request.method} {request.url}")


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info(f"Response: {request.method} {request.url} - {response.status_code}")


def create_http_client(
    config: ClientConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx client for ``config``.

    Args:
        config: Supplies the proxy, timeout and debug flag.
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        A configured ``httpx.Client``. The caller owns it and must close it.
    """
    event_hooks: dict[str, list] = {"request": [], "response": []}
    if config.debug:
        event_hooks["request"].append(_log_request)
        event_hooks["response"].append(_log_response)

    proxy = config.http_proxy.url if config.http_proxy else None
    logger.debug(f"Creating HTTP client (proxy: {proxy}, timeout: {config.timeout})")

    return httpx.Client(
        transport=transport,
        proxy=proxy,
        timeout=config.timeout,
        headers={"User-Agent": USER_AGENT},
        event_hooks=event_hooks,
    )
