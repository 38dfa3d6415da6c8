"""Transfer data model (NFT and fungible transfers share the shape)."""

from pydantic import BaseModel, ConfigDict

from .common import SaleDetails


class Transfer(BaseModel):
    """Single inbound or outbound transfer."""

    nft_id: str | None = None
    fungible_id: str | None = None
    chain: str
    contract_address: str | None = None
    token_id: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    quantity: int | None = None
    timestamp: str | None = None
    block_number: int | None = None
    block_hash: str | None = None
    transaction: str | None = None
    log_index: int | None = None
    batch_transfer_index: int | None = None
    sale_details: SaleDetails | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
