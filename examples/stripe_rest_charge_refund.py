#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from stripity.stripe.connector import StripeRESTConnector
from stripity.stripe.core import APIError, StripeConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Charge a test card, then partially refund it")
    p.add_argument("amount", nargs="?", type=int, default=1000)
    p.add_argument("--source", default="tok_visa", help="Token or card id to charge")
    p.add_argument("--refund", type=int, default=250, help="Amount to refund")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with StripeRESTConnector(StripeConfig.from_env()) as stripe:
        try:
            charge = await stripe.create_charge(
                args.amount, {"source": args.source, "description": "stripity example"}
            )
            print(f"Charged {charge.amount} {charge.currency} as {charge.id} ({charge.status})")
            refund = await stripe.refund_charge(charge.id, amount=args.refund)
            print(f"Refunded {refund.amount} as {refund.id}")
            charge = await stripe.retrieve_charge(charge.id)
            print(f"Still refundable: {charge.amount_refundable}")
        except APIError as exc:
            print(f"Stripe error {exc.status_code} ({exc.code}): {exc.message}")


if __name__ == "__main__":
    asyncio.run(main())
