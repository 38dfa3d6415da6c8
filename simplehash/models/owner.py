"""NFT owner data model."""

from pydantic import BaseModel, ConfigDict


class Owner(BaseModel):
    """Wallet holding some quantity of an NFT."""

    nft_id: str | None = None
    owner_address: str
    quantity: int = 1
    first_acquired_date: str | None = None
    last_acquired_date: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
