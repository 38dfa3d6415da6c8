"""Endpoint registry.

This module exports every endpoint specification and adapter and maps
endpoint ids to them.
"""

from __future__ import annotations

from simplehash.runtime.rest import ResponseAdapter, RestEndpointSpec

from .collections import (
    COLLECTION_ID_LOOKUP,
    COLLECTION_IDS_CHUNK_SIZE,
    COLLECTIONS_BY_IDS,
    TRAIT_FLOOR_PRICES_BY_NFT,
    CollectionInfoListAdapter,
    CollectionListAdapter,
    FloorPriceListAdapter,
)
from .fungibles import (
    FUNGIBLE_BALANCES_BY_WALLETS,
    FUNGIBLE_TRANSFERS_BY_WALLETS,
    FungibleBalanceAdapter,
)
from .nfts import (
    NFT_BY_TOKEN_ID,
    NFTS_BY_COLLECTION,
    NFTS_BY_CONTRACT,
    NFTS_BY_OWNERS,
    NFTAdapter,
    NFTListAdapter,
)
from .transfers import (
    OWNERS_BY_NFT,
    TRANSFERS_BY_NFT,
    TRANSFERS_BY_WALLETS,
    OwnerListAdapter,
    TransferListAdapter,
)

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    spec.id: (spec, adapter)
    for spec, adapter in (
        (NFTS_BY_COLLECTION, NFTListAdapter),
        (NFTS_BY_CONTRACT, NFTListAdapter),
        (NFTS_BY_OWNERS, NFTListAdapter),
        (NFT_BY_TOKEN_ID, NFTAdapter),
        (TRANSFERS_BY_WALLETS, TransferListAdapter),
        (TRANSFERS_BY_NFT, TransferListAdapter),
        (OWNERS_BY_NFT, OwnerListAdapter),
        (COLLECTION_ID_LOOKUP, CollectionInfoListAdapter),
        (COLLECTIONS_BY_IDS, CollectionListAdapter),
        (TRAIT_FLOOR_PRICES_BY_NFT, FloorPriceListAdapter),
        (FUNGIBLE_BALANCES_BY_WALLETS, FungibleBalanceAdapter),
        (FUNGIBLE_TRANSFERS_BY_WALLETS, TransferListAdapter),
    )
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "nfts_by_contract")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "nfts_by_contract")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """All registered endpoint IDs."""
    return sorted(_ENDPOINT_REGISTRY)


__all__ = [
    "COLLECTION_IDS_CHUNK_SIZE",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
