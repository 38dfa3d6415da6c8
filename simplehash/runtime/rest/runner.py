"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.enums import Category
from ...core.exceptions import PartialResultError, ProviderError
from ..pagination import PageQuery, PaginatedResult, PaginatedRetriever
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    category: Category = Category.NFTS
    # Response field holding the items; None marks a single-object endpoint
    field_name: str | None = None
    # Endpoint reports a total `count`, which enables parallel fan-out
    supports_count: bool = False
    # Flood-control spacing override in seconds
    min_interval: float | None = None

    @property
    def paginated(self) -> bool:
        return self.field_name is not None


class ResponseAdapter:
    def __init__(self) -> None:
        # Errors for raw items that could not be parsed and were skipped
        self.rejected: list[ProviderError] = []

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(
        self,
        transport: RESTTransport,
        retriever: PaginatedRetriever,
        *,
        end_point: str,
        strict: bool = False,
    ) -> None:
        self._t = transport
        self._retriever = retriever
        self._end_point = end_point
        self._strict = strict

    def build_query(self, spec: RestEndpointSpec, params: dict[str, Any]) -> PageQuery:
        # Path and query builders validate params and raise before any I/O
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else {}
        return PageQuery(
            end_point=self._end_point,
            category=Category(spec.category).value,
            path=path,
            params=query,
            field_name=spec.field_name or "",
            supports_count=spec.supports_count,
            min_interval=spec.min_interval,
        )

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        """Fetch a single-object endpoint."""
        query = self.build_query(spec, params)
        outcome = await self._t.fetch(
            query.url, query.params or None, min_interval=query.min_interval
        )
        if not outcome.ok and self._strict:
            raise outcome.error
        parsed = adapter.parse(outcome.payload, params)
        if adapter.rejected and self._strict:
            raise adapter.rejected[0]
        return parsed

    async def paginate(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> PaginatedResult:
        """Fetch every page of a listing endpoint and parse the items."""
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id} is not paginated")
        query = self.build_query(spec, params)
        result = await self._retriever.retrieve(query)
        result.items = adapter.parse(result.items, params)
        if adapter.rejected:
            result.skipped_items += len(adapter.rejected)
            result.errors.extend(adapter.rejected)
            if self._strict:
                raise PartialResultError(
                    f"{len(adapter.rejected)} malformed item(s) skipped in {spec.id}", result
                )
        return result
