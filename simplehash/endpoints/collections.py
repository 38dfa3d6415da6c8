"""Collection endpoints: id lookup, summaries and trait floor prices."""

from __future__ import annotations

from typing import Any

from simplehash.core import Marketplace, ValidationError
from simplehash.models import Collection, CollectionInfo, FloorPrice
from simplehash.runtime.rest import RestEndpointSpec

from .common import ModelListAdapter, chain_param, required

# Collection ids accepted by one collections/ids request
COLLECTION_IDS_CHUNK_SIZE = 50


def _lookup_query(params: dict[str, Any]) -> dict[str, Any]:
    metaplex_mint = params.get("metaplex_mint")
    if metaplex_mint:
        return {"metaplex_mint": metaplex_mint}

    collection_id = params.get("marketplace_collection_id")
    marketplace = params.get("marketplace_name")
    if collection_id and marketplace:
        return {
            "marketplace_collection_id": collection_id,
            "marketplace_name": Marketplace.coerce(marketplace).value,
        }
    raise ValidationError(
        "metaplex_mint or both marketplace_collection_id and marketplace_name are required"
    )


def _ids_query(params: dict[str, Any]) -> dict[str, Any]:
    ids = [str(i).strip() for i in params.get("collection_ids") or [] if str(i).strip()]
    if not ids:
        raise ValidationError("At least one collection id is required")
    if len(ids) > COLLECTION_IDS_CHUNK_SIZE:
        raise ValidationError(
            f"At most {COLLECTION_IDS_CHUNK_SIZE} collection ids per request, got {len(ids)}"
        )
    return {"collection_ids": ",".join(ids)}


def _floors_path(params: dict[str, Any]) -> str:
    chain = chain_param(params).value
    contract = required(params, "contract_address")
    return f"traits/{chain}/{contract}/{required(params, 'token_id')}/floors"


COLLECTION_ID_LOOKUP = RestEndpointSpec(
    id="collection_id_lookup",
    build_path=lambda params: "collections",
    build_query=_lookup_query,
    field_name="collections",
    supports_count=True,
)

COLLECTIONS_BY_IDS = RestEndpointSpec(
    id="collections_by_ids",
    build_path=lambda params: "collections/ids",
    build_query=_ids_query,
    field_name="collections",
    supports_count=True,
)

TRAIT_FLOOR_PRICES_BY_NFT = RestEndpointSpec(
    id="trait_floor_price_by_nft",
    build_path=_floors_path,
    field_name="trait_floor_prices",
    supports_count=True,
)


class CollectionInfoListAdapter(ModelListAdapter):
    model = CollectionInfo


class CollectionListAdapter(ModelListAdapter):
    model = Collection


class FloorPriceListAdapter(ModelListAdapter):
    model = FloorPrice
