"""Testing utilities for code built on the DNSimple client.

Example:
    ```python
    import httpx

    from dnsimple import Client
    from dnsimple.testing import RecordingHandler, create_mock_response


    def test_lists_records():
        handler = RecordingHandler([create_mock_response([{"id": 1}], pagination={"total_pages": 1})])
        client = Client(username="u", api_token="t", transport=httpx.MockTransport(handler))
        assert len(client.zones.records(1010, "example.com")) == 1
        assert handler.requests[0].url.path == "/v1/1010/zones/example.com/records"
    ```
"""

from collections.abc import Callable, Iterable
from typing import Any

import httpx


def create_mock_response(
    data: Any = None,
    *,
    pagination: dict[str, Any] | None = None,
    status_code: int = 200,
) -> httpx.Response:
    """Build a DNSimple success response with ``data`` and optional pagination."""
    body: dict[str, Any] = {"data": data}
    if pagination is not None:
        body["pagination"] = pagination
    return httpx.Response(status_code, json=body)


def create_error_response(
    status_code: int,
    message: str | None = None,
    errors: dict[str, Any] | None = None,
) -> httpx.Response:
    """Build a DNSimple error response."""
    body: dict[str, Any] = {}
    if message is not None:
        body["message"] = message
    if errors is not None:
        body["errors"] = errors
    return httpx.Response(status_code, json=body)


class RecordingHandler:
    """``httpx.MockTransport`` handler that replays responses and keeps requests.

    Args:
        responses: Responses returned in order, or a callable mapping each
            request to a response.
    """

    def __init__(self, responses: Iterable[httpx.Response] | Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        if callable(responses):
            self._respond = responses
        else:
            queue = list(responses)

            def respond(request: httpx.Request) -> httpx.Response:
                if not queue:
                    raise AssertionError(f"Unexpected request: {request.method} {request.url}")
                return queue.pop(0)

            self._respond = respond

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


__all__ = ["RecordingHandler", "create_error_response", "create_mock_response"]
