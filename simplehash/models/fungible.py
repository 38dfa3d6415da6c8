"""Fungible token balance data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FungibleToken(BaseModel):
    """Fungible token held by one or more queried wallets.

    ``token_address`` is not sent by the API; it is derived from
    ``fungible_id`` (``<chain>.<address>``) when the balance is parsed.
    """

    fungible_id: str
    chain: str | None = None
    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None
    total_quantity: int | None = None
    total_quantity_string: str | None = None
    queried_wallet_balances: list[dict[str, Any]] | None = None
    prices: list[dict[str, Any]] | None = None
    token_address: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


def token_address_from_fungible_id(fungible_id: str) -> str | None:
    """Return the address part of ``<chain>.<address>``, or None."""
    parts = fungible_id.split(".")
    return parts[1] if len(parts) > 1 else None
