"""Data models for API entities.

Architecture:
    This module exports the Pydantic v2 models the endpoint adapters build
    from raw JSON items. Models are immutable (frozen=True) and tolerant:
    unknown fields are kept (extra="allow") and almost every field is
    optional, so new API fields or sparse rows never break a listing.

Model Categories:
    - NFTs: NFT, Previews, ContractInfo
    - Ownership and movement: Owner, Transfer, Sale, SaleDetails
    - Collections: Collection, CollectionInfo, MarketplacePage, FloorPrice
    - Fungibles: FungibleToken
"""

from .collection import Collection, CollectionInfo, MarketplacePage
from .common import FloorPrice, PaymentToken, Sale, SaleDetails
from .fungible import FungibleToken, token_address_from_fungible_id
from .nft import NFT, ContractInfo, Previews
from .owner import Owner
from .transfer import Transfer

__all__ = [
    "Collection",
    "CollectionInfo",
    "ContractInfo",
    "FloorPrice",
    "FungibleToken",
    "MarketplacePage",
    "NFT",
    "Owner",
    "PaymentToken",
    "Previews",
    "Sale",
    "SaleDetails",
    "Transfer",
    "token_address_from_fungible_id",
]
