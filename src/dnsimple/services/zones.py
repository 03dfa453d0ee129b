"""Zones and zone records."""

from typing import Any

from dnsimple.pagination import paginate
from dnsimple.response import CollectionResponse, PaginatedResponse, Response
from dnsimple.services.base import ClientService
from dnsimple.structs import Record, Zone


class ZonesService(ClientService):
    """Zone and zone record endpoints.

    ``account_id`` is a numeric account ID or ``WILDCARD_ACCOUNT``.
    """

    def zones(self, account_id: int | str, options: dict[str, Any] | None = None) -> PaginatedResponse[Zone]:
        """List one page of zones in the account.

        Example:
            ```python
            client.zones.zones(1010, {"query": {"page": 2}})
            ```
        """
        response = self.client.get(f"/{account_id}/zones", options)
        return PaginatedResponse.from_page(response, [Zone.from_dict(z) for z in response.json()["data"]])

    list_zones = zones

    def all_zones(self, account_id: int | str, options: dict[str, Any] | None = None) -> CollectionResponse[Zone]:
        """List every zone in the account, fetching all pages."""
        return paginate(self.zones, account_id, options=options)

    def zone(self, account_id: int | str, zone_id: str, options: dict[str, Any] | None = None) -> Response[Zone]:
        """Get a zone.

        Raises:
            NotFoundError: If the zone does not exist.
        """
        response = self.client.get(f"/{account_id}/zones/{zone_id}", options)
        return Response(response, Zone.from_dict(response.json()["data"]))

    def records(
        self,
        account_id: int | str,
        zone_id: str,
        options: dict[str, Any] | None = None,
    ) -> PaginatedResponse[Record]:
        """List one page of records in the zone.

        Example:
            ```python
            client.zones.records(1010, "example.com", {"query": {"page": 2}})
            ```
        """
        response = self.client.get(f"/{account_id}/zones/{zone_id}/records", options)
        return PaginatedResponse.from_page(response, [Record.from_dict(r) for r in response.json()["data"]])

    list_records = records

    def all_records(
        self,
        account_id: int | str,
        zone_id: str,
        options: dict[str, Any] | None = None,
    ) -> CollectionResponse[Record]:
        """List every record in the zone.

        Issues one request per page, so large zones cost several requests
        against the account's rate limit.
        """
        return paginate(self.records, account_id, zone_id, options=options)

    def record(
        self,
        account_id: int | str,
        zone_id: str,
        record_id: int,
        options: dict[str, Any] | None = None,
    ) -> Response[Record]:
        """Get a record.

        Raises:
            NotFoundError: If the record does not exist.
        """
        response = self.client.get(f"/{account_id}/zones/{zone_id}/records/{record_id}", options)
        return Response(response, Record.from_dict(response.json()["data"]))

    def create_record(
        self,
        account_id: int | str,
        zone_id: str,
        attributes: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Response[Record]:
        """Create a record in the zone.

        Raises:
            ValidationError: If the server rejects the attributes.
        """
        response = self.client.post(f"/{account_id}/zones/{zone_id}/records", self._with_body(options, attributes))
        return Response(response, Record.from_dict(response.json()["data"]))

    def update_record(
        self,
        account_id: int | str,
        zone_id: str,
        record_id: int,
        attributes: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Response[Record]:
        response = self.client.patch(
            f"/{account_id}/zones/{zone_id}/records/{record_id}",
            self._with_body(options, attributes),
        )
        return Response(response, Record.from_dict(response.json()["data"]))

    def delete_record(
        self,
        account_id: int | str,
        zone_id: str,
        record_id: int,
        options: dict[str, Any] | None = None,
    ) -> Response[None]:
        response = self.client.delete(f"/{account_id}/zones/{zone_id}/records/{record_id}", options)
        return Response(response, None)
