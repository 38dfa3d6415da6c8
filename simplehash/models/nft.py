"""NFT data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .collection import Collection
from .common import Sale
from .owner import Owner


class Previews(BaseModel):
    """Resized preview images."""

    image_small_url: str | None = None
    image_medium_url: str | None = None
    image_large_url: str | None = None
    image_opengraph_url: str | None = None
    blurhash: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class ContractInfo(BaseModel):
    """Token standard and naming of the contract an NFT belongs to."""

    type: str | None = None
    name: str | None = None
    symbol: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class NFT(BaseModel):
    """NFT metadata as returned by the nfts endpoints."""

    nft_id: str
    chain: str
    contract_address: str
    token_id: str | None = None
    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None
    model_url: str | None = None
    previews: Previews | None = None
    background_color: str | None = None
    external_url: str | None = None
    created_date: str | None = None
    status: str | None = None
    token_count: int | None = None
    owner_count: int | None = None
    owners: list[Owner] = Field(default_factory=list)
    last_sale: Sale | None = None
    contract: ContractInfo | None = None
    collection: Collection | None = None
    extra_metadata: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def attributes(self) -> list[dict[str, Any]]:
        """Trait list from ``extra_metadata``, empty when absent."""
        if not self.extra_metadata:
            return []
        return list(self.extra_metadata.get("attributes") or [])
