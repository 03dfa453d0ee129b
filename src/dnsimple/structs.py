"""Typed records for DNSimple API objects.

Each struct is a flat, immutable projection of a JSON object: field names are
the JSON keys, unknown keys are ignored and missing keys stay ``None``.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, TypeVar

S = TypeVar("S", bound="Struct")


@dataclass(frozen=True)
class Struct:
    """Base class for API records."""

    @classmethod
    def from_dict(cls: type[S], data: dict[str, Any] | None) -> S:
        """Build a struct from a JSON object."""
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in (data or {}).items() if key in names})

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to a JSON object with every declared key."""
        return asdict(self)


@dataclass(frozen=True)
class Pagination(Struct):
    """Pagination metadata as reported by the API."""

    current_page: int | None = None
    per_page: int | None = None
    total_entries: int | None = None
    total_pages: int | None = None


@dataclass(frozen=True)
class Zone(Struct):
    # The zone ID in DNSimple.
    id: int | None = None
    account_id: int | None = None
    name: str | None = None
    # True if the zone is a reverse zone.
    reverse: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class Record(Struct):
    """A DNS record in a zone."""

    id: int | None = None
    zone_id: str | None = None
    # The ID of the parent record, if this record is dependent on another.
    parent_id: int | None = None
    type: str | None = None
    name: str | None = None
    content: str | None = None
    ttl: int | None = None
    priority: int | None = None
    # True if this is a system record created by DNSimple.
    system_record: bool | None = None
    regions: list[str] | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class DomainTransfer(Struct):
    """A domain transfer request.

    Attributes:
        id: The domain transfer ID in DNSimple.
        domain_id: The associated domain ID.
        registrant_id: The associated registrant (contact) ID.
        state: The state of the transfer.
        auto_renew: True if the domain auto-renew was requested.
        private_whois: True if the domain WHOIS privacy was requested.
        premium_price: The premium price requested for the transfer.
        created_at: When the transfer was created in DNSimple.
        updated_at: When the transfer was last updated in DNSimple.
    """

    id: int | None = None
    domain_id: int | None = None
    registrant_id: int | None = None
    state: str | None = None
    auto_renew: bool | None = None
    private_whois: bool | None = None
    premium_price: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
