"""Core components."""

from .config import DEFAULT_END_POINT, DEFAULT_FLOOD_INTERVAL, ClientOptions
from .enums import Category, Chain, Marketplace, Order, join_chains
from .exceptions import (
    CursorError,
    PartialResultError,
    ProviderError,
    SimpleHashError,
    ValidationError,
)

__all__ = [
    "DEFAULT_END_POINT",
    "DEFAULT_FLOOD_INTERVAL",
    "ClientOptions",
    "Category",
    "Chain",
    "Marketplace",
    "Order",
    "join_chains",
    "SimpleHashError",
    "ValidationError",
    "ProviderError",
    "CursorError",
    "PartialResultError",
]
