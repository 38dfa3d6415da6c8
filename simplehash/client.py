"""SimpleHash REST client.

This client exposes one method per API endpoint. Each method only collects
its parameters; the endpoint registry supplies the path/query builders and
the response adapter, and the paginated retriever does the fetching.

Architecture:
    SimpleHashClient owns one flood-control limiter, one transport and one
    retriever. The limiter's last-request time is therefore shared by every
    call made through the same client instance.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

from .core import (
    Chain,
    ClientOptions,
    Marketplace,
    Order,
    ValidationError,
)
from .core.config import API_KEY_ENV
from .endpoints import COLLECTION_IDS_CHUNK_SIZE, get_endpoint_adapter, get_endpoint_spec
from .models import (
    NFT,
    Collection,
    CollectionInfo,
    FloorPrice,
    FungibleToken,
    Owner,
    Transfer,
)
from .runtime.pagination import FloodControl, PaginatedResult, PaginatedRetriever
from .runtime.rest import RestRunner, RESTTransport


class SimpleHashClient:
    """Async client for the SimpleHash NFT and fungible token API.

    Example:
        >>> async with SimpleHashClient(api_key, parallel_requests=10) as client:
        ...     nfts = await client.nfts_by_owners(["ethereum"], [wallet])
    """

    def __init__(
        self,
        api_key: str,
        options: ClientOptions | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Key sent in the ``x-api-key`` header
            options: Base options (defaults to ``ClientOptions()``)
            **overrides: Option overrides merged on top of ``options``;
                camelCase names of the JavaScript SDK are accepted

        Raises:
            ValidationError: If the key is empty or an option is invalid
        """
        if not api_key:
            raise ValidationError("api_key is required")
        self.options = (options or ClientOptions()).merge(**overrides)
        self._limiter = FloodControl(
            enabled=self.options.flood_control,
            interval=self.options.flood_interval,
        )
        self._transport = RESTTransport(
            api_key,
            limiter=self._limiter,
            timeout=self.options.request_timeout,
        )
        self._retriever = PaginatedRetriever(
            self._transport,
            max_parallelism=self.options.parallel_requests,
            strict=self.options.strict,
            debug=self.options.debug_mode,
        )
        self._runner = RestRunner(
            self._transport,
            self._retriever,
            end_point=self.options.end_point,
            strict=self.options.strict,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> SimpleHashClient:
        """Create a client from ``SIMPLEHASH_*`` environment variables."""
        api_key = os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise ValidationError(f"{API_KEY_ENV} is not set")
        return cls(api_key, ClientOptions.from_env(), **overrides)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch an endpoint by id.

        Returns the parsed item list for listing endpoints and the parsed
        object for single-object endpoints.

        Raises:
            ValueError: If endpoint_id is not found in registry
            ValidationError: If params are invalid for the endpoint
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        if spec.paginated:
            result = await self.fetch_paginated(endpoint_id, params)
            return result.items

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_paginated(self, endpoint_id: str, params: dict[str, Any]) -> PaginatedResult:
        """Fetch every page of a listing endpoint.

        The returned result carries page counters, so callers can check
        ``result.complete`` to detect pages lost to transport failures.
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None or not spec.paginated:
            raise ValueError(f"Unknown paginated REST endpoint: {endpoint_id}")
        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return await self._runner.paginate(spec=spec, adapter=adapter_cls(), params=params)

    async def nfts_by_collection(
        self, collection_id: str, *, endpoint: str = "collection"
    ) -> list[NFT]:
        """All NFTs of a collection.

        Args:
            collection_id: Collection id (from an NFT response or a collection id lookup)
            endpoint: Path segment before the id
        """
        params = {"collection_id": collection_id, "endpoint": endpoint}
        return await self.fetch("nfts_by_collection", params)

    async def nfts_by_contract(self, chain: Chain | str, contract_address: str) -> list[NFT]:
        """All NFTs of a contract. On Solana this behaves like a token id lookup."""
        params = {"chain": chain, "contract_address": contract_address}
        return await self.fetch("nfts_by_contract", params)

    async def nfts_by_owners(
        self,
        chains: Sequence[Chain | str],
        wallet_addresses: Sequence[str],
        queried_wallet_balances: int | None = None,
    ) -> list[NFT]:
        """NFTs held by up to 20 wallets across chains.

        Args:
            chains: Chains to search
            wallet_addresses: Owner wallet addresses
            queried_wallet_balances: Pass 1 to include per-wallet quantities and
                acquisition dates (useful for ERC1155)
        """
        params = {
            "chains": list(chains),
            "wallet_addresses": list(wallet_addresses),
            "queried_wallet_balances": queried_wallet_balances,
        }
        return await self.fetch("nfts_by_owners", params)

    async def nft_by_token_id(
        self, chain: Chain | str, contract_address: str, token_id: str
    ) -> NFT | None:
        """A single NFT, or None when the request failed."""
        params = {"chain": chain, "contract_address": contract_address, "token_id": token_id}
        return await self.fetch("nft_by_token_id", params)

    async def transfers_by_wallets(
        self,
        chains: Sequence[Chain | str],
        wallet_addresses: Sequence[str],
        order: Order | str = Order.TIMESTAMP_DESC,
    ) -> list[Transfer]:
        """Inbound and outbound NFT transfers of up to 20 wallets."""
        params = {
            "chains": list(chains),
            "wallet_addresses": list(wallet_addresses),
            "order": order,
        }
        return await self.fetch("transfers_by_wallets", params)

    async def transfers_by_nft(
        self,
        chain: Chain | str,
        contract_address: str,
        token_id: str = "",
        order: Order | str = Order.TIMESTAMP_DESC,
    ) -> list[Transfer]:
        """Historical transfers of one NFT.

        Raises:
            ValidationError: If token_id is empty on a non-Solana chain
        """
        params = {
            "chain": chain,
            "contract_address": contract_address,
            "token_id": token_id,
            "order": order,
        }
        return await self.fetch("transfers_by_nft", params)

    async def owners_by_nft(
        self, chain: Chain | str, contract_address: str, token_id: str = ""
    ) -> list[Owner]:
        """Wallets owning an NFT (several for ERC1155, none for burned tokens).

        On Solana only the chain and mint address are needed.

        Raises:
            ValidationError: If token_id is empty on a non-Solana chain
        """
        params = {"chain": chain, "contract_address": contract_address, "token_id": token_id}
        return await self.fetch("owners_by_nft", params)

    async def collection_id_lookup(
        self,
        metaplex_mint: str = "",
        marketplace_collection_id: str = "",
        marketplace_name: Marketplace | str = Marketplace.OPENSEA,
    ) -> list[CollectionInfo]:
        """Resolve collection ids from a Metaplex mint or a marketplace collection id.

        Raises:
            ValidationError: If neither lookup key is given
        """
        params = {
            "metaplex_mint": metaplex_mint,
            "marketplace_collection_id": marketplace_collection_id,
            "marketplace_name": marketplace_name,
        }
        return await self.fetch("collection_id_lookup", params)

    async def collections_by_ids(self, collection_ids: Sequence[str]) -> list[Collection]:
        """Summary metadata of collections, requested 50 ids at a time."""
        ids = list(collection_ids)
        collections: list[Collection] = []
        for start in range(0, len(ids), COLLECTION_IDS_CHUNK_SIZE):
            chunk = ids[start : start + COLLECTION_IDS_CHUNK_SIZE]
            collections.extend(await self.fetch("collections_by_ids", {"collection_ids": chunk}))
        return collections

    async def trait_floor_price_by_nft(
        self, chain: Chain | str, contract_address: str, token_id: str
    ) -> list[FloorPrice]:
        """Floor prices of each trait of an NFT, highest first (at most 50)."""
        params = {"chain": chain, "contract_address": contract_address, "token_id": token_id}
        return await self.fetch("trait_floor_price_by_nft", params)

    async def fungibles_balance_by_wallets(
        self,
        chains: Sequence[Chain | str],
        wallet_addresses: Sequence[str],
        include_prices: bool = False,
    ) -> list[FungibleToken]:
        """Fungible balances of up to 20 wallets, by last transfer date."""
        params = {
            "chains": list(chains),
            "wallet_addresses": list(wallet_addresses),
            "include_prices": include_prices,
        }
        return await self.fetch("fungibles_balance_by_wallets", params)

    async def fungible_sales_and_transfers_by_wallets(
        self,
        chains: Sequence[Chain | str],
        wallet_addresses: Sequence[str],
        fungible_ids: Sequence[str] = (),
        from_timestamp: int | None = None,
        to_timestamp: int | None = None,
    ) -> list[Transfer]:
        """Inbound and outbound fungible transfers of up to 20 wallets.

        Args:
            chains: Chains to search
            wallet_addresses: Wallet addresses
            fungible_ids: Restrict to these fungible ids
            from_timestamp: Inclusive lower bound, seconds since the epoch
            to_timestamp: Inclusive upper bound, seconds since the epoch
        """
        params = {
            "chains": list(chains),
            "wallet_addresses": list(wallet_addresses),
            "fungible_ids": list(fungible_ids),
            "from_timestamp": from_timestamp,
            "to_timestamp": to_timestamp,
        }
        return await self.fetch("fungible_sales_and_transfers_by_wallets", params)

    async def close(self) -> None:
        """Close underlying resources."""
        await self._transport.close()

    async def __aenter__(self) -> SimpleHashClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def create_client(
    api_key: str, options: ClientOptions | None = None, **overrides: Any
) -> SimpleHashClient:
    """Create a client; mirrors ``createApi`` of the JavaScript SDK."""
    return SimpleHashClient(api_key, options, **overrides)
