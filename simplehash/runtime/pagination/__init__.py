"""Cursor pagination layer.

This module provides the retrieval engine behind every listing endpoint:
following server ``next`` links, fanning out over synthesized cursors and
spacing requests under flood control.

Architecture:
    - results.py: Query, page and result shapes (PageQuery, Page, PaginatedResult)
    - cursor.py: Cursor codec (decode offsets, synthesize sibling cursors)
    - limiter.py: Flood control (RateLimiter, FloodControl)
    - retriever.py: Sequential and parallel retrieval (PaginatedRetriever)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .cursor import (
    DEFAULT_PAGE_SIZE,
    DecodedCursor,
    cursor_from_url,
    decode_cursor,
    encode_cursor,
    synthesize_cursor,
)
from .limiter import FloodControl, RateLimiter
from .results import FetchOutcome, Page, PageQuery, PaginatedResult
from .retriever import PaginatedRetriever, fan_out_width, plan_positions

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DecodedCursor",
    "FetchOutcome",
    "FloodControl",
    "Page",
    "PageQuery",
    "PaginatedResult",
    "PaginatedRetriever",
    "RateLimiter",
    "cursor_from_url",
    "decode_cursor",
    "encode_cursor",
    "fan_out_width",
    "plan_positions",
    "synthesize_cursor",
]
