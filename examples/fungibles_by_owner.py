#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from simplehash import SimpleHashClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List fungible balances of wallets via the SimpleHash API")
    p.add_argument("wallets", nargs="+", help="Wallet addresses (at most 20)")
    p.add_argument("--chains", default="ethereum", help="Comma-separated chains")
    p.add_argument("--prices", action="store_true", help="Include token prices")
    p.add_argument("--parallel", type=int, default=5, help="Concurrent page requests")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with SimpleHashClient.from_env(parallel_requests=args.parallel) as client:
        result = await client.fetch_paginated(
            "fungibles_balance_by_wallets",
            {
                "chains": args.chains.split(","),
                "wallet_addresses": args.wallets,
                "include_prices": args.prices,
            },
        )
    print(
        f"{len(result)} tokens ({result.mode}, {result.pages_fetched} pages, "
        f"{result.failed_pages} failed):"
    )
    print(f"{'Symbol':10} | {'Token address':42} | {'Quantity':>28}")
    print("-" * 86)
    for token in result.items:
        quantity = token.total_quantity_string or str(token.total_quantity or 0)
        print(f"{(token.symbol or '?'):10} | {(token.token_address or '-'):42} | {quantity:>28}")


if __name__ == "__main__":
    asyncio.run(main())
