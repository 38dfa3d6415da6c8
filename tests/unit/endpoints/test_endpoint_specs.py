"""Unit tests for endpoint specs: paths, queries and input validation."""

from __future__ import annotations

import pytest

from simplehash.core import Category, ValidationError
from simplehash.endpoints import get_endpoint_adapter, get_endpoint_spec, list_endpoints
from simplehash.endpoints.collections import COLLECTION_IDS_CHUNK_SIZE
from simplehash.endpoints.common import MAX_WALLET_ADDRESSES, nft_path, wallets_param
from simplehash.endpoints.fungibles import FUNGIBLES_MIN_INTERVAL, FungibleBalanceAdapter
from simplehash.endpoints.nfts import NFTAdapter
from simplehash.models import NFT, CollectionInfo, FungibleToken


def path_of(endpoint_id: str, params: dict) -> str:
    return get_endpoint_spec(endpoint_id).build_path(params)


def query_of(endpoint_id: str, params: dict) -> dict:
    spec = get_endpoint_spec(endpoint_id)
    return spec.build_query(params) if spec.build_query else {}


class TestRegistry:
    """Test the endpoint registry."""

    def test_all_endpoints_registered(self):
        assert list_endpoints() == sorted(
            [
                "collection_id_lookup",
                "collections_by_ids",
                "fungible_sales_and_transfers_by_wallets",
                "fungibles_balance_by_wallets",
                "nft_by_token_id",
                "nfts_by_collection",
                "nfts_by_contract",
                "nfts_by_owners",
                "owners_by_nft",
                "trait_floor_price_by_nft",
                "transfers_by_nft",
                "transfers_by_wallets",
            ]
        )

    def test_unknown_endpoint(self):
        assert get_endpoint_spec("nope") is None
        assert get_endpoint_adapter("nope") is None

    def test_only_nft_by_token_id_is_single_object(self):
        single = [e for e in list_endpoints() if not get_endpoint_spec(e).paginated]
        assert single == ["nft_by_token_id"]

    @pytest.mark.parametrize(
        "endpoint_id",
        [
            "nfts_by_collection",
            "nfts_by_contract",
            "transfers_by_nft",
            "owners_by_nft",
            "collection_id_lookup",
            "collections_by_ids",
            "trait_floor_price_by_nft",
            "fungibles_balance_by_wallets",
            "fungible_sales_and_transfers_by_wallets",
        ],
    )
    def test_count_bearing_endpoints(self, endpoint_id):
        assert get_endpoint_spec(endpoint_id).supports_count

    @pytest.mark.parametrize("endpoint_id", ["nfts_by_owners", "transfers_by_wallets"])
    def test_endpoints_without_count(self, endpoint_id):
        assert not get_endpoint_spec(endpoint_id).supports_count

    def test_fungibles_family(self):
        for endpoint_id in ("fungibles_balance_by_wallets", "fungible_sales_and_transfers_by_wallets"):
            spec = get_endpoint_spec(endpoint_id)
            assert spec.category == Category.FUNGIBLES
            assert spec.min_interval == FUNGIBLES_MIN_INTERVAL


class TestNFTEndpoints:
    """Test NFT endpoint paths and queries."""

    def test_nfts_by_collection(self):
        assert path_of("nfts_by_collection", {"collection_id": "c0ffee"}) == "collection/c0ffee"

    def test_nfts_by_collection_custom_segment(self):
        params = {"collection_id": "c0ffee", "endpoint": "collection_v2"}
        assert path_of("nfts_by_collection", params) == "collection_v2/c0ffee"

    def test_nfts_by_contract(self):
        params = {"chain": "ethereum", "contract_address": "0xabc"}
        assert path_of("nfts_by_contract", params) == "ethereum/0xabc"
        assert get_endpoint_spec("nfts_by_contract").field_name == "nfts"

    def test_nfts_by_owners_query(self):
        params = {
            "chains": ["ethereum", "polygon"],
            "wallet_addresses": ["0xa", "0xb"],
            "queried_wallet_balances": 1,
        }
        assert path_of("nfts_by_owners", params) == "owners"
        assert query_of("nfts_by_owners", params) == {
            "chains": "ethereum,polygon",
            "wallet_addresses": "0xa,0xb",
            "queried_wallet_balances": 1,
        }

    def test_nfts_by_owners_without_balances(self):
        params = {"chains": ["ethereum"], "wallet_addresses": ["0xa"]}
        assert "queried_wallet_balances" not in query_of("nfts_by_owners", params)

    def test_nft_by_token_id(self):
        params = {"chain": "ethereum", "contract_address": "0xabc", "token_id": "7"}
        assert path_of("nft_by_token_id", params) == "ethereum/0xabc/7"

    def test_nft_by_token_id_requires_token(self):
        with pytest.raises(ValidationError):
            path_of("nft_by_token_id", {"chain": "ethereum", "contract_address": "0xabc"})

    def test_nft_adapter(self):
        adapter = NFTAdapter()
        assert adapter.parse({}, {}) is None
        nft = adapter.parse(
            {"nft_id": "ethereum.0xabc.7", "chain": "ethereum", "contract_address": "0xabc"}, {}
        )
        assert isinstance(nft, NFT)

    def test_nft_adapter_malformed_body(self):
        adapter = NFTAdapter()
        assert adapter.parse({"chain": "ethereum"}, {}) is None
        assert len(adapter.rejected) == 1

    def test_list_adapter_skips_malformed_items(self, caplog):
        adapter = get_endpoint_adapter("nfts_by_owners")()
        rows = [
            {"nft_id": "ethereum.0xabc.1", "chain": "ethereum", "contract_address": "0xabc"},
            {"nft_id": "ethereum.0xabc.2", "chain": "ethereum"},
            "not-an-object",
            {"nft_id": "ethereum.0xabc.3", "chain": "ethereum", "contract_address": "0xabc"},
        ]

        with caplog.at_level("ERROR", logger="simplehash.endpoints.common"):
            nfts = adapter.parse(rows, {})

        assert [n.nft_id for n in nfts] == ["ethereum.0xabc.1", "ethereum.0xabc.3"]
        assert len(adapter.rejected) == 2
        assert "NFT" in str(adapter.rejected[0])
        rejected_logs = [r for r in caplog.records if r.getMessage() == "item_rejected"]
        assert [r.model for r in rejected_logs] == ["NFT", "NFT"]

class TestNFTPath:
    """Test nft_path() token id rules."""

    def test_token_required_outside_solana(self):
        with pytest.raises(ValidationError, match="token_id"):
            nft_path({"chain": "ethereum", "contract_address": "0xabc", "token_id": ""})

    @pytest.mark.parametrize("chain", ["solana", "solana-devnet", "solana-testnet"])
    def test_solana_mint_only(self, chain):
        assert nft_path({"chain": chain, "contract_address": "Mint111"}) == f"{chain}/Mint111"

    def test_solana_with_token(self):
        params = {"chain": "solana", "contract_address": "Mint111", "token_id": "1"}
        assert nft_path(params) == "solana/Mint111/1"

    def test_contract_required(self):
        with pytest.raises(ValidationError):
            nft_path({"chain": "ethereum", "contract_address": " ", "token_id": "1"})

    def test_unknown_chain(self):
        with pytest.raises(ValidationError):
            nft_path({"chain": "dogechain", "contract_address": "0xabc", "token_id": "1"})


class TestWallets:
    """Test wallet address validation."""

    def test_strips_blanks(self):
        assert wallets_param({"wallet_addresses": [" 0xa ", "", "0xb"]}) == "0xa,0xb"

    def test_requires_one(self):
        with pytest.raises(ValidationError):
            wallets_param({"wallet_addresses": []})

    def test_limit(self):
        wallets = [f"0x{i}" for i in range(MAX_WALLET_ADDRESSES)]
        assert wallets_param({"wallet_addresses": wallets}).count(",") == MAX_WALLET_ADDRESSES - 1
        with pytest.raises(ValidationError):
            wallets_param({"wallet_addresses": wallets + ["0xextra"]})


class TestTransferEndpoints:
    """Test transfer and ownership endpoints."""

    def test_transfers_by_wallets(self):
        params = {"chains": ["ethereum"], "wallet_addresses": ["0xa"], "order": "timestamp_asc"}
        assert path_of("transfers_by_wallets", params) == "transfers/wallets"
        assert query_of("transfers_by_wallets", params) == {
            "chains": "ethereum",
            "wallet_addresses": "0xa",
            "order_by": "timestamp_asc",
        }

    def test_transfers_by_nft_default_order(self):
        params = {"chain": "ethereum", "contract_address": "0xabc", "token_id": "1"}
        assert path_of("transfers_by_nft", params) == "transfers/ethereum/0xabc/1"
        assert query_of("transfers_by_nft", params) == {"order_by": "timestamp_desc"}

    def test_transfers_by_nft_rejects_unknown_order(self):
        params = {"chain": "ethereum", "contract_address": "0xabc", "token_id": "1", "order": "x"}
        with pytest.raises(ValidationError):
            query_of("transfers_by_nft", params)

    def test_owners_by_nft(self):
        params = {"chain": "solana", "contract_address": "Mint111"}
        assert path_of("owners_by_nft", params) == "owners/solana/Mint111"
        assert get_endpoint_spec("owners_by_nft").field_name == "owners"


class TestCollectionEndpoints:
    """Test collection endpoints."""

    def test_lookup_by_mint(self):
        params = {"metaplex_mint": "Mint111", "marketplace_name": "opensea"}
        assert query_of("collection_id_lookup", params) == {"metaplex_mint": "Mint111"}

    def test_lookup_by_marketplace(self):
        params = {"marketplace_collection_id": "boredapeyachtclub", "marketplace_name": "OpenSea"}
        assert query_of("collection_id_lookup", params) == {
            "marketplace_collection_id": "boredapeyachtclub",
            "marketplace_name": "opensea",
        }

    def test_lookup_requires_identifier(self):
        with pytest.raises(ValidationError):
            query_of("collection_id_lookup", {"marketplace_name": "opensea"})

    def test_lookup_adapter(self):
        adapter = get_endpoint_adapter("collection_id_lookup")()
        parsed = adapter.parse([{"id": "c0ffee", "name": "Apes"}], {})
        assert parsed == [CollectionInfo(id="c0ffee", name="Apes")]

    def test_collections_by_ids(self):
        params = {"collection_ids": ["a", "b"]}
        assert path_of("collections_by_ids", params) == "collections/ids"
        assert query_of("collections_by_ids", params) == {"collection_ids": "a,b"}

    def test_collections_by_ids_chunk_limit(self):
        ids = [str(i) for i in range(COLLECTION_IDS_CHUNK_SIZE + 1)]
        with pytest.raises(ValidationError):
            query_of("collections_by_ids", {"collection_ids": ids})

    def test_trait_floor_prices(self):
        params = {"chain": "ethereum", "contract_address": "0xabc", "token_id": "1"}
        assert path_of("trait_floor_price_by_nft", params) == "traits/ethereum/0xabc/1/floors"
        assert get_endpoint_spec("trait_floor_price_by_nft").field_name == "trait_floor_prices"


class TestFungibleEndpoints:
    """Test fungible endpoints."""

    def test_balances_query(self):
        params = {"chains": ["ethereum"], "wallet_addresses": ["0xa"], "include_prices": True}
        assert path_of("fungibles_balance_by_wallets", params) == "balances"
        assert query_of("fungibles_balance_by_wallets", params) == {
            "chains": "ethereum",
            "wallet_addresses": "0xa",
            "include_prices": 1,
        }

    def test_balances_adapter_fills_token_address(self):
        rows = [
            {"fungible_id": "ethereum.0xa0b8", "symbol": "USDC"},
            {"fungible_id": "ethereum.native", "symbol": "ETH"},
        ]
        tokens = FungibleBalanceAdapter().parse(rows, {})
        assert all(isinstance(t, FungibleToken) for t in tokens)
        assert [t.token_address for t in tokens] == ["0xa0b8", "native"]

    def test_balances_adapter_skips_rows_without_fungible_id(self):
        adapter = FungibleBalanceAdapter()
        tokens = adapter.parse([{"symbol": "???"}, {"fungible_id": "ethereum.0xa0b8"}], {})
        assert [t.fungible_id for t in tokens] == ["ethereum.0xa0b8"]
        assert len(adapter.rejected) == 1

    def test_transfers_query(self):
        params = {
            "chains": ["ethereum"],
            "wallet_addresses": ["0xa"],
            "fungible_ids": ["ethereum.0xa0b8", "ethereum.0xdac1"],
            "from_timestamp": 0,
            "to_timestamp": 1700000000,
        }
        assert query_of("fungible_sales_and_transfers_by_wallets", params) == {
            "chains": "ethereum",
            "wallet_addresses": "0xa",
            "fungible_ids": "ethereum.0xa0b8,ethereum.0xdac1",
            "from_timestamp": 0,
            "to_timestamp": 1700000000,
        }

    def test_transfers_query_optional_filters(self):
        params = {"chains": ["ethereum"], "wallet_addresses": ["0xa"]}
        assert query_of("fungible_sales_and_transfers_by_wallets", params) == {
            "chains": "ethereum",
            "wallet_addresses": "0xa",
        }
