"""Fetch every page of a list endpoint.

``paginate`` works with any single-page fetch method whose last positional
argument is the options dict and which returns a ``PaginatedResponse``:

    ```python
    from dnsimple.pagination import paginate

    everything = paginate(client.zones.records, account_id, "example.com")
    ```

Pages are requested strictly in order, starting at 1, until the page count
reported with the first page has been fetched.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from dnsimple.response import CollectionResponse, PaginatedResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


def paginate(
    fetch: Callable[..., PaginatedResponse[T]],
    *args: Any,
    options: dict[str, Any] | None = None,
) -> CollectionResponse[T]:
    """Call ``fetch(*args, options)`` for every page and concatenate the data.

    Args:
        fetch: Single-page fetch method.
        *args: Positional arguments passed before the options.
        options: Per-call options. Copied, never modified. Any ``page`` in
            ``options["query"]`` is replaced.

    Returns:
        All items, in page order.
    """
    options = dict(options or {})
    query = dict(options.get("query") or {})

    items: list[T] = []
    total_pages: int | None = None
    page = 1
    while True:
        # Each page gets its own options so fetch may keep a reference
        response = fetch(*args, {**options, "query": {**query, "page": page}})
        items.extend(response.data)

        # The page count is fixed by the first response and pages are counted locally
        if page == 1:
            total_pages = response.total_pages
        logger.debug(f"Fetched page {page}/{total_pages} ({len(response.data)} items)")

        if total_pages is None or page >= total_pages:
            break
        page += 1

    return CollectionResponse(data=items)
