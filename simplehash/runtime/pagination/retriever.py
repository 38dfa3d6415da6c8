"""Paginated retrieval engine.

Architecture:
    The retriever turns one ``PageQuery`` into the complete item list, in one
    of two modes selected once per query:

    - Sequential: fetch the first page, then follow ``next`` URLs until the
      server stops returning one. Strict server order.
    - Parallel: fetch the first page with ``count=1``, recover the page size
      from the first ``next`` cursor, synthesize cursors for every remaining
      offset and fetch them in concurrent batches of at most
      ``max_parallelism`` requests. Results are joined batch by batch, in
      issuance order inside a batch (``asyncio.gather`` keeps argument order).

    Parallel mode falls back to sequential when the first page reports no
    ``count`` or the cursor cannot be decoded or re-encoded.

Failure Model:
    The transport never raises. A failed page is recorded in the result
    (``failed_pages``, ``errors``) and contributes no items: sequential mode
    stops there since a failed page has no ``next``, parallel mode keeps the
    other pages. With ``strict=True`` the first failed page raises
    ``PartialResultError`` carrying what was gathered so far.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Protocol

from ...core.exceptions import CursorError, PartialResultError
from .cursor import CURSOR_PARAM, cursor_from_url, decode_cursor, synthesize_cursor
from .results import FetchOutcome, Page, PageQuery, PaginatedResult
from .telemetry import (
    log_cursor_fallback,
    log_fan_out_planned,
    log_page_failed,
    log_page_fetched,
    log_retrieval_complete,
)

logger = logging.getLogger(__name__)

COUNT_PARAM = "count"


class PageTransport(Protocol):
    async def fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        min_interval: float | None = None,
    ) -> FetchOutcome: ...


def plan_positions(count: int, page_size: int) -> list[int]:
    """Offsets of every page after the first: page_size, 2*page_size, ... < count."""
    if page_size <= 0:
        raise CursorError(f"Invalid page size: {page_size}")
    return list(range(page_size, count, page_size))


def fan_out_width(count: int, page_size: int, max_parallelism: int) -> int:
    """Concurrent requests per batch: min(ceil(count / page_size), max_parallelism)."""
    return max(1, min(math.ceil(count / page_size), max_parallelism))


class PaginatedRetriever:
    """Fetches every page of a query through a transport."""

    def __init__(
        self,
        transport: PageTransport,
        *,
        max_parallelism: int = 1,
        strict: bool = False,
        debug: bool = False,
    ) -> None:
        if max_parallelism < 1:
            raise ValueError("max_parallelism must be >= 1")
        self._transport = transport
        self._max_parallelism = max_parallelism
        self._strict = strict
        self._debug = debug

    @property
    def max_parallelism(self) -> int:
        return self._max_parallelism

    async def retrieve(self, query: PageQuery) -> PaginatedResult:
        """Retrieve all items, choosing the mode from the query and parallelism."""
        if query.supports_count and self._max_parallelism > 1:
            return await self.retrieve_all_parallel(query)
        return await self.retrieve_all(query)

    async def retrieve_all(self, query: PageQuery) -> PaginatedResult:
        """Follow ``next`` links from the first page until none is returned."""
        result = PaginatedResult(mode="sequential")
        first = await self._fetch(query, query.url, dict(query.params))
        self._absorb(query, result, first)
        result.total_count = first.count
        await self._follow(query, first.next, result)
        log_retrieval_complete(query=query, result=result)
        return result

    async def retrieve_all_parallel(self, query: PageQuery) -> PaginatedResult:
        """Fetch the first page, then all remaining pages in concurrent batches."""
        result = PaginatedResult(mode="parallel")
        first = await self._fetch(query, query.url, {**query.params, COUNT_PARAM: 1})
        self._absorb(query, result, first)
        result.total_count = first.count

        if not first.next:
            log_retrieval_complete(query=query, result=result)
            return result

        try:
            page_size, cursors = self._plan_cursors(query, first)
        except CursorError as e:
            log_cursor_fallback(query=query, reason=str(e))
            result.mode = "sequential"
            await self._follow(query, first.next, result)
            log_retrieval_complete(query=query, result=result)
            return result

        total = first.count or 0
        threads = fan_out_width(total, page_size, self._max_parallelism)
        log_fan_out_planned(
            query=query,
            total_count=total,
            page_size=page_size,
            threads=threads,
            positions=len(cursors),
        )

        for start in range(0, len(cursors), threads):
            batch = cursors[start : start + threads]
            pages = await asyncio.gather(
                *(
                    self._fetch(query, query.url, {**query.params, CURSOR_PARAM: cursor})
                    for cursor in batch
                )
            )
            for page in pages:
                self._absorb(query, result, page)

        log_retrieval_complete(query=query, result=result)
        return result

    def _plan_cursors(self, query: PageQuery, first: Page) -> tuple[int, list[str]]:
        """Synthesize the cursor of every remaining page up front.

        Returns the page size and one cursor per offset, in offset order.

        Raises:
            CursorError: If the plan cannot be built from the first page
        """
        if first.count is None:
            raise CursorError("First page carried no count")
        raw = cursor_from_url(first.next)
        if raw is None:
            raise CursorError("Next URL carried no cursor")

        template = decode_cursor(raw)
        if template.position is None:
            raise CursorError("Cursor has no offset marker")
        page_size = template.page_size
        positions = plan_positions(first.count, page_size)

        cursors: list[str] = []
        for position in positions:
            cursor = synthesize_cursor(template, template.position, position, page_size)
            if self._debug:
                logger.debug(
                    "cursor_synthesized",
                    extra={"path": query.path, "position": position, "cursor": cursor},
                )
            cursors.append(cursor)
        return page_size, cursors

    async def _follow(self, query: PageQuery, next_url: str | None, result: PaginatedResult) -> None:
        while next_url:
            page = await self._fetch(query, next_url, None)
            self._absorb(query, result, page)
            next_url = page.next

    async def _fetch(self, query: PageQuery, url: str, params: dict[str, Any] | None) -> Page:
        outcome = await self._transport.fetch(url, params, min_interval=query.min_interval)
        if not outcome.ok:
            return Page.failed(outcome.error)
        return Page.from_response(outcome.payload, query.field_name)

    def _absorb(self, query: PageQuery, result: PaginatedResult, page: Page) -> None:
        page_index = result.pages_fetched
        result.pages_fetched += 1
        if not page.ok:
            result.failed_pages += 1
            result.errors.append(page.error)
            log_page_failed(query=query, page_index=page_index, error_message=str(page.error))
            if self._strict:
                raise PartialResultError(
                    f"Page {page_index} of {query.path} failed: {page.error}", result
                )
            return
        result.items.extend(page.items)
        log_page_fetched(query=query, page_index=page_index, items=len(page.items))
