"""NFT metadata endpoints.

- ``nfts_by_collection``: every NFT of a collection (count-bearing)
- ``nfts_by_contract``: every NFT of a contract (count-bearing)
- ``nfts_by_owners``: NFTs held by wallets (no count, sequential only)
- ``nft_by_token_id``: a single NFT
"""

from __future__ import annotations

from typing import Any

from simplehash.models import NFT
from simplehash.runtime.rest import RestEndpointSpec

from .common import (
    ModelAdapter,
    ModelListAdapter,
    chain_param,
    chains_param,
    required,
    wallets_param,
)


def _collection_path(params: dict[str, Any]) -> str:
    endpoint = params.get("endpoint") or "collection"
    return f"{endpoint}/{required(params, 'collection_id')}"


def _contract_path(params: dict[str, Any]) -> str:
    return f"{chain_param(params).value}/{required(params, 'contract_address')}"


def _owners_query(params: dict[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {
        "chains": chains_param(params),
        "wallet_addresses": wallets_param(params),
    }
    if params.get("queried_wallet_balances"):
        query["queried_wallet_balances"] = int(params["queried_wallet_balances"])
    return query


def _token_path(params: dict[str, Any]) -> str:
    chain = chain_param(params).value
    contract = required(params, "contract_address")
    return f"{chain}/{contract}/{required(params, 'token_id')}"


NFTS_BY_COLLECTION = RestEndpointSpec(
    id="nfts_by_collection",
    build_path=_collection_path,
    field_name="nfts",
    supports_count=True,
)

NFTS_BY_CONTRACT = RestEndpointSpec(
    id="nfts_by_contract",
    build_path=_contract_path,
    field_name="nfts",
    supports_count=True,
)

NFTS_BY_OWNERS = RestEndpointSpec(
    id="nfts_by_owners",
    build_path=lambda params: "owners",
    build_query=_owners_query,
    field_name="nfts",
)

NFT_BY_TOKEN_ID = RestEndpointSpec(
    id="nft_by_token_id",
    build_path=_token_path,
)


class NFTListAdapter(ModelListAdapter):
    model = NFT


class NFTAdapter(ModelAdapter):
    """Parses a single NFT; an empty (failed) or malformed body yields None."""

    model = NFT

    def parse(self, response: Any, params: dict[str, Any]) -> NFT | None:
        if not response:
            return None
        return self.validate(response)
