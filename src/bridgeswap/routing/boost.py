"""Boost swap provider.

Presents an atomic swap followed by a DEX aggregator swap as one swap:
one quote, one fee estimate, one status timeline and one continuation
step. Reaches tokens the atomic swap protocol can't deliver directly,
e.g. BTC -> DAI goes BTC -> ETH (atomic swap) then ETH -> DAI (DEX).
"""

import logging
import time
from decimal import Decimal
from typing import Any, Optional

from bridgeswap.assets import pretty_balance
from bridgeswap.config import get_settings
from bridgeswap.routing.adapters import atomic_leg_quote, atomic_leg_updates
from bridgeswap.routing.base import (
    AtomicSwapLeg,
    DexAggregatorLeg,
    FeeVector,
    Quote,
    Swap,
    SwapUpdate,
)
from bridgeswap.routing.coordinator import LegTransitionCoordinator
from bridgeswap.routing.fees import FeeAggregator
from bridgeswap.routing.quotes import QuoteAggregator
from bridgeswap.routing.statuses import StatusOverride, build_status_table

logger = logging.getLogger(__name__)

# ======================
# Status table
# ======================
# Steps: 0-2 atomic swap, 3 DEX swap, 4 done

BOOST_STATUS_OVERRIDES: dict[str, StatusOverride] = {
    "FUNDED": StatusOverride(label="Locking {bridge_asset}"),
    "CONFIRM_COUNTER_PARTY_INITIATION": StatusOverride(
        label="Locking {bridge_asset}",
        notification=lambda swap: (
            f"Counterparty sent {pretty_balance(swap.bridge_asset_amount, swap.bridge_asset)} "
            f"{swap.bridge_asset} to escrow"
        ),
    ),
    "READY_TO_CLAIM": StatusOverride(label="Claiming {bridge_asset}"),
    "WAITING_FOR_CLAIM_CONFIRMATIONS": StatusOverride(label="Claiming {bridge_asset}"),
    "WAITING_FOR_APPROVE_CONFIRMATIONS": StatusOverride(
        step=3,
        label="Approving {bridge_asset}",
        notification=lambda swap: f"Approving {swap.bridge_asset}",
    ),
    "APPROVE_CONFIRMED": StatusOverride(step=3, label="Swapping {bridge_asset} for {to_asset}"),
    "WAITING_FOR_SWAP_CONFIRMATIONS": StatusOverride(step=3),
    "SUCCESS": StatusOverride(step=4, label="Completed"),
    "FAILED": StatusOverride(step=4),
}

# SUCCESS comes from the atomic swap table, layered last
BOOST_STATUSES = build_status_table(
    [
        AtomicSwapLeg.statuses,
        DexAggregatorLeg.statuses,
        {"SUCCESS": AtomicSwapLeg.statuses["SUCCESS"]},
    ],
    BOOST_STATUS_OVERRIDES,
)

# Fields of a new swap taken from the boost quote rather than the leg result
BOOST_OWNED_FIELDS = frozenset({
    "id", "status", "from_asset", "to_asset", "from_amount", "to_amount",
    "bridge_asset", "bridge_asset_amount", "slippage", "network", "wallet_id",
    "from_account_id", "to_account_id", "start_time",
})

BOOST_TX_TYPES: dict[str, str] = {
    **AtomicSwapLeg.tx_types,
    **DexAggregatorLeg.tx_types,
}


class BoostSwapProvider:
    """Composite swap provider: atomic swap into a DEX aggregator swap."""

    name = "boost"

    statuses = BOOST_STATUSES
    tx_types = BOOST_TX_TYPES
    total_steps = 5

    # Markers used by activity history to classify the two on-chain legs
    from_tx_type = BOOST_TX_TYPES["SWAP_INITIATION"]
    to_tx_type = BOOST_TX_TYPES["SWAP"]

    def __init__(
        self,
        atomic_leg: AtomicSwapLeg,
        dex_leg: DexAggregatorLeg,
        slippage_percentage: Optional[int] = None,
    ):
        settings = get_settings()
        self.atomic_leg = atomic_leg
        self.dex_leg = dex_leg
        self.slippage_percentage = (
            slippage_percentage if slippage_percentage is not None
            else settings.boost_slippage_percentage
        )

        self.quotes = QuoteAggregator(atomic_leg, dex_leg)
        self.fees = FeeAggregator(atomic_leg, dex_leg, self.slippage_percentage)
        self.coordinator = LegTransitionCoordinator(
            atomic_leg,
            dex_leg,
            self.statuses,
            self.slippage_percentage,
            poll_min_interval=settings.claim_poll_interval_min_seconds,
            poll_max_interval=settings.claim_poll_interval_max_seconds,
            poll_max_attempts=settings.claim_poll_max_attempts,
        )

    async def get_supported_pairs(self) -> list:
        """Boost routes are only offered on direct quote requests."""
        return []

    async def get_quote(
        self,
        network: str,
        from_asset: str,
        to_asset: str,
        amount: Decimal,
    ) -> Optional[Quote]:
        return await self.quotes.get_quote(network, from_asset, to_asset, amount)

    async def new_swap(self, network: str, wallet_id: str, quote: Quote) -> Swap:
        """Start a boost swap by initiating its atomic swap leg.

        Returns:
            Swap record in the atomic leg's initial status
        """
        result = atomic_leg_updates(
            await self.atomic_leg.new_swap(network, wallet_id, atomic_leg_quote(quote))
        )

        swap = Swap(
            id=result["id"],
            status=result["status"],
            from_asset=quote.from_asset,
            to_asset=quote.to_asset,
            from_amount=quote.from_amount,
            to_amount=quote.to_amount,
            bridge_asset=quote.bridge_asset,
            bridge_asset_amount=result["bridge_asset_amount"],
            slippage=self.slippage_percentage * 100,
            network=network,
            wallet_id=wallet_id,
            from_account_id=quote.from_account_id or result.get("from_account_id"),
            to_account_id=quote.to_account_id or result.get("to_account_id"),
            start_time=result.get("start_time") or int(time.time() * 1000),
        )
        # Leg fields the boost record doesn't model are kept as-is
        swap.apply_updates({
            key: value for key, value in result.items()
            if key not in BOOST_OWNED_FIELDS
        })

        logger.info(
            f"Boost swap {swap.id} created: {swap.from_amount} {swap.from_asset} -> "
            f"{swap.bridge_asset} -> {swap.to_asset} ({swap.status})"
        )
        return swap

    async def estimate_fees(
        self,
        network: str,
        wallet_id: str,
        asset: str,
        tx_type: str,
        quote: Quote,
        fee_prices: list[Decimal],
        is_max: bool = False,
    ) -> FeeVector:
        return await self.fees.estimate_fees(
            network, wallet_id, asset, tx_type, quote, fee_prices, is_max
        )

    async def perform_next_swap_action(
        self,
        store: Any,
        network: str,
        wallet_id: str,
        swap: Swap,
    ) -> Optional[SwapUpdate]:
        return await self.coordinator.perform_next_swap_action(store, network, wallet_id, swap)

    def get_status(self, status: str):
        """Get the descriptor for a status key (None if unknown)."""
        return self.statuses.get(status)

    def is_terminal(self, swap: Swap) -> bool:
        descriptor = self.statuses.get(swap.status)
        return descriptor is not None and descriptor.is_terminal
