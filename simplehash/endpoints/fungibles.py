"""Fungible token endpoints (``fungibles`` category).

These endpoints are in beta on the API side and are rate limited more
tightly, hence the wider flood-control spacing.
"""

from __future__ import annotations

from typing import Any

from simplehash.core import Category
from simplehash.models import FungibleToken, token_address_from_fungible_id
from simplehash.runtime.rest import RestEndpointSpec

from .common import ModelListAdapter, chains_param, wallets_param

FUNGIBLES_MIN_INTERVAL = 0.3


def _balances_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "chains": chains_param(params),
        "wallet_addresses": wallets_param(params),
        "include_prices": 1 if params.get("include_prices") else 0,
    }


def _transfers_query(params: dict[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {
        "chains": chains_param(params),
        "wallet_addresses": wallets_param(params),
    }
    fungible_ids = [f for f in params.get("fungible_ids") or [] if f]
    if fungible_ids:
        query["fungible_ids"] = ",".join(fungible_ids)
    if params.get("from_timestamp") is not None:
        query["from_timestamp"] = int(params["from_timestamp"])
    if params.get("to_timestamp") is not None:
        query["to_timestamp"] = int(params["to_timestamp"])
    return query


FUNGIBLE_BALANCES_BY_WALLETS = RestEndpointSpec(
    id="fungibles_balance_by_wallets",
    build_path=lambda params: "balances",
    build_query=_balances_query,
    category=Category.FUNGIBLES,
    field_name="fungibles",
    supports_count=True,
    min_interval=FUNGIBLES_MIN_INTERVAL,
)

FUNGIBLE_TRANSFERS_BY_WALLETS = RestEndpointSpec(
    id="fungible_sales_and_transfers_by_wallets",
    build_path=lambda params: "transfers/wallets",
    build_query=_transfers_query,
    category=Category.FUNGIBLES,
    field_name="transfers",
    supports_count=True,
    min_interval=FUNGIBLES_MIN_INTERVAL,
)


class FungibleBalanceAdapter(ModelListAdapter):
    """Parses balances and fills ``token_address`` from ``fungible_id``."""

    model = FungibleToken

    def prepare(self, row: Any) -> Any:
        if not isinstance(row, dict):
            return row
        fungible_id = str(row.get("fungible_id", ""))
        return {**row, "token_address": token_address_from_fungible_id(fungible_id)}
