#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from simplehash import SimpleHashClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List NFTs held by wallets via the SimpleHash API")
    p.add_argument("wallets", nargs="+", help="Wallet addresses (at most 20)")
    p.add_argument("--chains", default="ethereum", help="Comma-separated chains")
    p.add_argument("--debug", action="store_true", help="Log page and cursor events")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    # Reads SIMPLEHASH_API_KEY (and optional SIMPLEHASH_PARALLEL_REQUESTS)
    client = SimpleHashClient.from_env(debug_mode=args.debug)
    try:
        nfts = await client.nfts_by_owners(args.chains.split(","), args.wallets)
        print(f"{len(nfts)} NFTs across {args.chains}:")
        print(f"{'Chain':12} | {'Contract':42} | {'Token':>10} | Name")
        print("-" * 90)
        for nft in nfts:
            print(
                f"{nft.chain:12} | {nft.contract_address:42} | {(nft.token_id or '-'):>10} | {nft.name or ''}"
            )
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
