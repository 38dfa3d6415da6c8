"""NFT transfer and ownership endpoints."""

from __future__ import annotations

from typing import Any

from simplehash.core import Order
from simplehash.models import Owner, Transfer
from simplehash.runtime.rest import RestEndpointSpec

from .common import ModelListAdapter, chains_param, nft_path, wallets_param


def _order_query(params: dict[str, Any]) -> dict[str, Any]:
    order = Order.coerce(params.get("order") or Order.TIMESTAMP_DESC)
    return {"order_by": order.value}


def _wallets_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "chains": chains_param(params),
        "wallet_addresses": wallets_param(params),
        **_order_query(params),
    }


TRANSFERS_BY_WALLETS = RestEndpointSpec(
    id="transfers_by_wallets",
    build_path=lambda params: "transfers/wallets",
    build_query=_wallets_query,
    field_name="transfers",
)

TRANSFERS_BY_NFT = RestEndpointSpec(
    id="transfers_by_nft",
    build_path=lambda params: f"transfers/{nft_path(params)}",
    build_query=_order_query,
    field_name="transfers",
    supports_count=True,
)

OWNERS_BY_NFT = RestEndpointSpec(
    id="owners_by_nft",
    build_path=lambda params: f"owners/{nft_path(params)}",
    field_name="owners",
    supports_count=True,
)


class TransferListAdapter(ModelListAdapter):
    model = Transfer


class OwnerListAdapter(ModelListAdapter):
    model = Owner
