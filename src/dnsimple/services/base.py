"""Shared pieces of the per-resource services."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dnsimple.client import Client

# Account ID placeholder meaning "the account the credentials belong to".
WILDCARD_ACCOUNT = "_"


class ClientService:
    """A group of API methods bound to a client."""

    def __init__(self, client: "Client"):
        self.client = client

    @staticmethod
    def _with_body(options: dict[str, Any] | None, attributes: dict[str, Any]) -> dict[str, Any]:
        return {**(options or {}), "json": attributes}
