"""Collection data models."""

from pydantic import BaseModel, ConfigDict, Field

from .common import FloorPrice


class MarketplacePage(BaseModel):
    """Listing page of a collection on a marketplace."""

    marketplace_name: str
    marketplace_collection_id: str | None = None
    collection_url: str | None = None
    verified: bool | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Collection(BaseModel):
    """Summary metadata of a collection."""

    collection_id: str | None = None
    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    banner_image_url: str | None = None
    external_url: str | None = None
    twitter_username: str | None = None
    discord_url: str | None = None
    marketplace_pages: list[MarketplacePage] = Field(default_factory=list)
    metaplex_mint: str | None = None
    metaplex_first_verified_creator: str | None = None
    spam_score: int | None = None
    floor_prices: list[FloorPrice] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")


class CollectionInfo(BaseModel):
    """Result of a collection id lookup."""

    id: str
    name: str | None = None
    description: str | None = None
    chain: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
