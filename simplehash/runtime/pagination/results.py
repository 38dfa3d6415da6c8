"""Pagination data structures.

This module defines the query, page and result shapes that flow through the
paginated retriever.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.exceptions import ProviderError


@dataclass(frozen=True)
class PageQuery:
    """Immutable description of one logical listing request.

    Attributes:
        end_point: API base URL, ending with a slash
        category: Endpoint family path segment ("nfts" or "fungibles")
        path: Endpoint path below the category
        params: Query parameters of the first page
        field_name: Response field holding the page's items
        supports_count: Whether the endpoint reports a total ``count``
        min_interval: Flood-control spacing override for this endpoint
    """

    end_point: str
    category: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    field_name: str = "nfts"
    supports_count: bool = False
    min_interval: float | None = None

    @property
    def url(self) -> str:
        return f"{self.end_point}{self.category}/{self.path}"


@dataclass(frozen=True)
class Page:
    """One decoded response.

    Attributes:
        items: Raw items of the page, in server order
        next: URL of the following page, None on the last page
        count: Total listing size (first page, count-bearing endpoints only)
        error: Set when the request failed; the page is then empty
    """

    items: list[Any] = field(default_factory=list)
    next: str | None = None
    count: int | None = None
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_response(cls, payload: dict[str, Any], field_name: str) -> Page:
        items = payload.get(field_name) or []
        count = payload.get("count")
        return cls(
            items=list(items),
            next=payload.get("next") or None,
            count=int(count) if count is not None else None,
        )

    @classmethod
    def failed(cls, error: ProviderError) -> Page:
        return cls(error=error)


@dataclass
class PaginatedResult:
    """Aggregated result of a paginated retrieval.

    Attributes:
        items: Concatenated items. Sequential mode keeps server order;
            parallel mode keeps batch order and issuance order within a batch
        mode: "sequential" or "parallel" (the mode that produced the tail)
        pages_fetched: Number of page requests issued
        failed_pages: Number of page requests that failed
        skipped_items: Number of malformed items dropped while parsing
        total_count: Server-reported listing size, when known
        errors: Failures of the failed pages in join order, then item parse failures
    """

    items: list[Any] = field(default_factory=list)
    mode: str = "sequential"
    pages_fetched: int = 0
    failed_pages: int = 0
    skipped_items: int = 0
    total_count: int | None = None
    errors: list[ProviderError] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when no page failed and no item was skipped."""
        return self.failed_pages == 0 and self.skipped_items == 0

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class FetchOutcome:
    """Tagged result of one request.

    Attributes:
        payload: Decoded JSON object, or ``{}`` when the request failed
        error: Failure description, None on success
    """

    payload: dict[str, Any] = field(default_factory=dict)
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
