"""Core enumerations for the chains, marketplaces and orderings the API accepts.

Architecture:
    String enums keep wire values and Python identities interchangeable:
    ``Chain.ETHEREUM == "ethereum"`` holds, so callers may pass either the
    enum member or the raw string. ``coerce`` helpers turn caller strings into
    members and reject unknown values before any request is issued.

Key Types:
    - Chain: Supported networks (mainnets and testnets)
    - Marketplace: Marketplaces usable for collection id lookups
    - Order: Timestamp ordering for transfer listings
    - Category: Top-level API family (``nfts`` or ``fungibles``)
"""

from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class Chain(str, Enum):
    """Networks indexed by the API."""

    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    SOLANA = "solana"
    OPTIMISM = "optimism"
    ARBITRUM = "arbitrum"
    BITCOIN = "bitcoin"
    ARBITRUM_NOVA = "arbitrum-nova"
    AVALANCHE = "avalanche"
    BASE = "base"
    BSC = "bsc"
    CELO = "celo"
    FLOW = "flow"
    GNOSIS = "gnosis"
    GODWOKEN = "godwoken"
    LINEA = "linea"
    LOOT = "loot"
    PALM = "palm"
    POLYGON_ZKEVM = "polygon-zkevm"
    SCROLL = "scroll"
    ZKSYNC_ERA = "zksync-era"
    ZORA = "zora"

    # Testnets
    ETHEREUM_GOERLI = "ethereum-goerli"
    ETHEREUM_RINKEBY = "ethereum-rinkeby"
    ETHEREUM_SEPOLIA = "ethereum-sepolia"
    SOLANA_DEVNET = "solana-devnet"
    SOLANA_TESTNET = "solana-testnet"
    POLYGON_MUMBAI = "polygon-mumbai"
    ARBITRUM_GOERLI = "arbitrum-goerli"
    AVALANCHE_FUJI = "avalanche-fuji"
    BASE_GOERLI = "base-goerli"
    BSC_TESTNET = "bsc-testnet"
    FRAME_TESTNET = "frame-testnet"
    GODWOKEN_TESTNET = "godwoken-testnet"
    LINEA_TESTNET = "linea-testnet"
    MANTA_TESTNET = "manta-testnet"
    OPTIMISM_GOERLI = "optimism-goerli"
    PALM_TESTNET = "palm-testnet"
    PALM_TESTNET_EDGE = "palm-testnet-edge"
    POLYGON_ZKEVM_TESTNET = "polygon-zkevm-testnet"
    SCROLL_TESTNET = "scroll-testnet"
    SCROLL_SEPOLIA = "scroll-sepolia"
    ZKSYNC_ERA_TESTNET = "zksync-era-testnet"
    ZORA_TESTNET = "zora-testnet"

    @property
    def is_solana(self) -> bool:
        """Whether the chain belongs to the Solana family."""
        return self in _SOLANA_CHAINS

    @property
    def requires_token_id(self) -> bool:
        """Whether NFT-level endpoints need a token id on this chain.

        Solana NFTs are addressed by mint address alone; every other chain
        identifies an NFT by contract address plus token id.
        """
        return not self.is_solana

    @classmethod
    def coerce(cls, value: Chain | str) -> Chain:
        """Convert a chain name to a member, rejecting unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unsupported chain: {value!r}") from None


_SOLANA_CHAINS = frozenset({Chain.SOLANA, Chain.SOLANA_DEVNET, Chain.SOLANA_TESTNET})


class Marketplace(str, Enum):
    """Marketplaces whose collection ids can be resolved."""

    OPENSEA = "opensea"
    QUIXOTIC = "quixotic"
    STRATOS = "stratos"
    TROVE = "trove"

    @classmethod
    def coerce(cls, value: Marketplace | str) -> Marketplace:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unsupported marketplace: {value!r}") from None


class Order(str, Enum):
    """Ordering of time-based listings."""

    TIMESTAMP_DESC = "timestamp_desc"
    TIMESTAMP_ASC = "timestamp_asc"

    @classmethod
    def coerce(cls, value: Order | str) -> Order:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unsupported order: {value!r}") from None


class Category(str, Enum):
    """Top-level API family; prefixes every endpoint path."""

    NFTS = "nfts"
    FUNGIBLES = "fungibles"


def join_chains(chains: list[Chain | str] | tuple[Chain | str, ...]) -> str:
    """Validate and comma-join chain names for multi-chain query parameters."""
    if not chains:
        raise ValidationError("At least one chain is required")
    return ",".join(Chain.coerce(chain).value for chain in chains)
