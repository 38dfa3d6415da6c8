"""SimpleHash - Async client for the SimpleHash NFT and fungible token API."""

from .client import SimpleHashClient, create_client
from .core import (
    DEFAULT_END_POINT,
    Category,
    Chain,
    ClientOptions,
    CursorError,
    Marketplace,
    Order,
    PartialResultError,
    ProviderError,
    SimpleHashError,
    ValidationError,
)
from .models import (
    NFT,
    Collection,
    CollectionInfo,
    FloorPrice,
    FungibleToken,
    Owner,
    Sale,
    Transfer,
)
from .runtime import FloodControl, PaginatedResult, PaginatedRetriever, RateLimiter

__version__ = "0.1.0"

__all__ = [
    # Client
    "SimpleHashClient",
    "create_client",
    "ClientOptions",
    "DEFAULT_END_POINT",
    # Enums
    "Category",
    "Chain",
    "Marketplace",
    "Order",
    # Exceptions
    "SimpleHashError",
    "ValidationError",
    "ProviderError",
    "CursorError",
    "PartialResultError",
    # Models
    "NFT",
    "Collection",
    "CollectionInfo",
    "FloorPrice",
    "FungibleToken",
    "Owner",
    "Sale",
    "Transfer",
    # Pagination
    "FloodControl",
    "PaginatedResult",
    "PaginatedRetriever",
    "RateLimiter",
]
