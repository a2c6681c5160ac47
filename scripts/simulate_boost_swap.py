#!/usr/bin/env python3
"""Boost Swap Simulation Script.

Quotes, estimates fees for, creates and drives a boost swap against the
simulated legs, printing every status the swap passes through.

Usage:
    python scripts/simulate_boost_swap.py [--from BTC] [--to DAI] [--amount 0.1]

Options:
    --from          Source native asset (default: BTC)
    --to            Destination token (default: DAI)
    --amount        Amount of the source asset (default: 0.1)
    --poll-seconds  Pause between continuation steps (default: 0)
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

from bridgeswap.assets import pretty_balance
from bridgeswap.config import get_settings
from bridgeswap.routing.factory import create_boost_provider

load_dotenv()

settings = get_settings()
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

FEE_PRICES = [Decimal("10"), Decimal("20"), Decimal("40")]
MAX_STEPS = 50


async def run(from_asset: str, to_asset: str, amount: Decimal, poll_seconds: float) -> int:
    logger.info(f"Settings: {settings.get_safe_dict()}")
    network = settings.default_network
    wallet_id = "dry-run-wallet"
    provider = create_boost_provider()
    # Handoff polling would otherwise wait 15-30s between attempts
    provider.coordinator.poll_min_interval = 0
    provider.coordinator.poll_max_interval = 0

    quote = await provider.get_quote(network, from_asset, to_asset, amount)
    if quote is None:
        print(f"No boost route for {amount} {from_asset} -> {to_asset}")
        return 1

    print(
        f"Quote: {quote.from_amount} {quote.from_asset} -> "
        f"{pretty_balance(quote.bridge_asset_amount, quote.bridge_asset)} {quote.bridge_asset} -> "
        f"{pretty_balance(quote.to_amount, quote.to_asset)} {quote.to_asset}"
    )

    for tx_type, asset in (("SWAP_INITIATION", quote.from_asset), ("SWAP_CLAIM", quote.to_asset)):
        fees = await provider.estimate_fees(network, wallet_id, asset, tx_type, quote, FEE_PRICES)
        print(f"Fees for {tx_type}: " + ", ".join(f"{price}: {fee}" for price, fee in fees.items()))

    swap = await provider.new_swap(network, wallet_id, quote)
    store = {}

    for _ in range(MAX_STEPS):
        descriptor = provider.get_status(swap.status)
        print(f"[{descriptor.step + 1}/{provider.total_steps}] {swap.status}: {descriptor.format_label(swap)}")
        message = descriptor.notify(swap)
        if message:
            print(f"    {message}")

        if descriptor.is_terminal:
            return 0 if descriptor.is_success else 1

        updates = await provider.perform_next_swap_action(store, network, wallet_id, swap)
        swap.apply_updates(updates)
        if poll_seconds:
            await asyncio.sleep(poll_seconds)

    logger.error(f"Swap {swap.id} did not finish within {MAX_STEPS} steps")
    return 1


def main():
    parser = argparse.ArgumentParser(description="Simulate a boost swap")
    parser.add_argument("--from", dest="from_asset", default="BTC", help="Source native asset")
    parser.add_argument("--to", dest="to_asset", default="DAI", help="Destination token")
    parser.add_argument("--amount", default="0.1", help="Amount of the source asset")
    parser.add_argument("--poll-seconds", type=float, default=0.0, help="Pause between steps")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(
        args.from_asset.upper(),
        args.to_asset.upper(),
        Decimal(args.amount),
        args.poll_seconds,
    )))


if __name__ == "__main__":
    main()
