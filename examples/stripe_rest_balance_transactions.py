#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from stripity.stripe.connector import StripeRESTConnector
from stripity.stripe.core import StripeConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Stripe balance transactions via REST")
    p.add_argument("--limit", type=int, default=25, help="Page size (1..100)")
    p.add_argument("--max", type=int, default=100, help="Stop after this many transactions")
    p.add_argument("--type", default=None, help="Only transactions of this type (e.g. charge)")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    stripe = StripeRESTConnector(StripeConfig.from_env())
    try:
        print(f"{'Id':30} | {'Created':25} | {'Type':12} | {'Net':>10}")
        print("-" * 86)
        count = 0
        paginator = stripe.stream_balance_transactions(limit=args.limit, type=args.type)
        async with paginator:
            async for txn in paginator:
                created = txn.created.isoformat() if txn.created else "-"
                print(f"{txn.id:30} | {created:25} | {txn.type or '-':12} | {txn.net:>10}")
                count += 1
                if count >= args.max:
                    break
        print(f"{count} transactions from {paginator.pages_fetched} pages")
    finally:
        await stripe.close()


if __name__ == "__main__":
    asyncio.run(main())
