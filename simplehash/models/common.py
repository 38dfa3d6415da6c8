"""Shared pricing shapes reused by NFTs, collections and transfers."""

from pydantic import BaseModel, ConfigDict


class PaymentToken(BaseModel):
    """Token used to settle a sale or quote a floor price."""

    payment_token_id: str
    name: str | None = None
    symbol: str | None = None
    address: str | None = None
    decimals: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class FloorPrice(BaseModel):
    """Floor price of a collection or trait on one marketplace."""

    marketplace_id: str | None = None
    value: int | float | None = None
    payment_token: PaymentToken | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class SaleDetails(BaseModel):
    """Sale attached to a transfer."""

    marketplace_name: str | None = None
    is_bundle_sale: bool = False
    payment_token: PaymentToken | None = None
    unit_price: int | float | None = None
    total_price: int | float | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Sale(SaleDetails):
    """Most recent sale of an NFT."""

    from_address: str | None = None
    to_address: str | None = None
    quantity: int | None = None
    timestamp: str | None = None
    transaction: str | None = None
