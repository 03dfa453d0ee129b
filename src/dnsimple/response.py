"""Response envelopes wrapping typed API data."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import httpx

from dnsimple.structs import Pagination

T = TypeVar("T")


@dataclass
class Response(Generic[T]):
    """A single item returned by the API."""

    http_response: httpx.Response
    data: T


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of a list endpoint.

    The pagination metadata is the server's, it is never computed locally.
    """

    http_response: httpx.Response
    data: list[T]
    pagination: Pagination = field(default_factory=Pagination)

    @classmethod
    def from_page(cls, http_response: httpx.Response, data: list[T]) -> "PaginatedResponse[T]":
        """Wrap ``data`` with the pagination block of ``http_response``."""
        body = http_response.json()
        return cls(
            http_response=http_response,
            data=data,
            pagination=Pagination.from_dict(body.get("pagination")),
        )

    @property
    def page(self) -> int | None:
        return self.pagination.current_page

    @property
    def per_page(self) -> int | None:
        return self.pagination.per_page

    @property
    def total_entries(self) -> int | None:
        return self.pagination.total_entries

    @property
    def total_pages(self) -> int | None:
        return self.pagination.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class CollectionResponse(Generic[T]):
    """Every item of a list endpoint, gathered across all pages."""

    data: list[T] = field(default_factory=list)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
