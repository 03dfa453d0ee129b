"""Standard request options and authentication selection.

Every request starts from ``standard_options(config)``: JSON is always
requested, and exactly one authentication scheme is chosen.

1. A password selects HTTP Basic auth with the username.
2. Otherwise an API token selects the ``X-DNSimple-Token`` header.
3. Otherwise the request fails with ``ConfigurationError``.

The check runs per request because credentials may be loaded lazily between
building the client and its first request.
"""

from typing import Any

from dnsimple.config import ClientConfig
from dnsimple.errors.exceptions import ConfigurationError

TOKEN_HEADER = "X-DNSimple-Token"


def standard_options(config: ClientConfig) -> dict[str, Any]:
    """Build the base options for a request.

    Returns:
        A dict with ``headers``, and ``auth`` and ``proxy`` where they apply.

    Raises:
        ConfigurationError: If neither a password nor an API token is set.
    """
    options: dict[str, Any] = {
        "headers": {"Accept": "application/json"},
    }

    if config.http_proxy:
        options["proxy"] = config.http_proxy.url

    if config.password:
        options["auth"] = (config.username or "", config.password)
    elif config.api_token:
        options["headers"][TOKEN_HEADER] = f"{config.username}:{config.api_token}"
    else:
        raise ConfigurationError("A password or API token is required for all API requests.")

    return options


def merge_options(base: dict[str, Any], overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Merge per-call options on top of ``base``.

    Keys in ``overrides`` replace those in ``base``, except ``headers`` which
    are merged header by header. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in (overrides or {}).items():
        if key == "headers":
            merged["headers"] = {**base.get("headers", {}), **(value or {})}
        else:
            merged[key] = value
    return merged
