"""Parameter helpers and adapters shared by the endpoint definitions."""

from __future__ import annotations

import logging
from typing import Any

import pydantic
from pydantic import BaseModel

from simplehash.core import Chain, ProviderError, ValidationError, join_chains
from simplehash.runtime.rest import ResponseAdapter

logger = logging.getLogger(__name__)

MAX_WALLET_ADDRESSES = 20


def chain_param(params: dict[str, Any]) -> Chain:
    """Validated single ``chain`` parameter."""
    return Chain.coerce(params["chain"])


def chains_param(params: dict[str, Any]) -> str:
    """Validated, comma-joined ``chains`` parameter."""
    return join_chains(params.get("chains") or [])


def wallets_param(params: dict[str, Any]) -> str:
    """Validated, comma-joined ``wallet_addresses`` parameter (1 to 20 addresses)."""
    wallets = [w.strip() for w in params.get("wallet_addresses") or [] if w and w.strip()]
    if not wallets:
        raise ValidationError("At least one wallet address is required")
    if len(wallets) > MAX_WALLET_ADDRESSES:
        raise ValidationError(
            f"At most {MAX_WALLET_ADDRESSES} wallet addresses are allowed, got {len(wallets)}"
        )
    return ",".join(wallets)


def required(params: dict[str, Any], key: str) -> str:
    """Non-empty string parameter."""
    value = params.get(key)
    if value is None or not str(value).strip():
        raise ValidationError(f"{key} is required")
    return str(value).strip()


def nft_path(params: dict[str, Any]) -> str:
    """``<chain>/<contract>[/<token_id>]``; the token id is optional on Solana only."""
    chain = chain_param(params)
    contract = required(params, "contract_address")
    token_id = str(params.get("token_id") or "").strip()
    if not token_id:
        if chain.requires_token_id:
            raise ValidationError(f"token_id is required for {chain.value} NFTs")
        return f"{chain.value}/{contract}"
    return f"{chain.value}/{contract}/{token_id}"


class ModelAdapter(ResponseAdapter):
    """Validates raw items into ``model``; malformed items are logged and skipped."""

    model: type[BaseModel]

    def prepare(self, row: Any) -> Any:
        """Hook to enrich a raw item before validation."""
        return row

    def validate(self, row: Any) -> Any:
        try:
            return self.model.model_validate(self.prepare(row))
        except pydantic.ValidationError as e:
            error = ProviderError(
                f"Malformed {self.model.__name__} item: {e.error_count()} validation error(s)"
            )
            logger.error(
                "item_rejected",
                extra={"model": self.model.__name__, "error_message": str(e)},
            )
            self.rejected.append(error)
            return None


class ModelListAdapter(ModelAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Any]:
        items = (self.validate(row) for row in response or [])
        return [item for item in items if item is not None]
