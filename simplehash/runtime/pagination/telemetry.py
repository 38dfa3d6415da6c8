"""Structured logging for pagination.

Event names are stable so log pipelines can key on them; details travel in
``extra``.
"""

from __future__ import annotations

import logging

from .results import PageQuery, PaginatedResult

logger = logging.getLogger(__name__)


def log_page_fetched(*, query: PageQuery, page_index: int, items: int) -> None:
    """Log one successfully fetched page.

    Args:
        query: Query the page belongs to
        page_index: Zero-based index in join order
        items: Number of items on the page
    """
    logger.debug(
        "page_fetched",
        extra={"path": query.path, "page_index": page_index, "items": items},
    )


def log_page_failed(*, query: PageQuery, page_index: int, error_message: str) -> None:
    """Log a page whose request failed and contributes no items."""
    logger.warning(
        "page_fetch_failed",
        extra={"path": query.path, "page_index": page_index, "error_message": error_message},
    )


def log_fan_out_planned(
    *,
    query: PageQuery,
    total_count: int,
    page_size: int,
    threads: int,
    positions: int,
) -> None:
    """Log the plan of a parallel retrieval.

    Args:
        query: Query being retrieved
        total_count: Server-reported listing size
        page_size: Page size recovered from the cursor
        threads: Concurrent requests per batch
        positions: Number of synthesized page requests
    """
    logger.info(
        "fan_out_planned",
        extra={
            "path": query.path,
            "total_count": total_count,
            "page_size": page_size,
            "threads": threads,
            "positions": positions,
        },
    )


def log_cursor_fallback(*, query: PageQuery, reason: str) -> None:
    """Log a switch from parallel fan-out to following ``next`` links."""
    logger.warning("cursor_fallback", extra={"path": query.path, "reason": reason})


def log_retrieval_complete(*, query: PageQuery, result: PaginatedResult) -> None:
    """Log completion of a retrieval."""
    logger.info(
        "retrieval_complete",
        extra={
            "path": query.path,
            "mode": result.mode,
            "items": len(result.items),
            "pages_fetched": result.pages_fetched,
            "failed_pages": result.failed_pages,
            "total_count": result.total_count,
        },
    )
