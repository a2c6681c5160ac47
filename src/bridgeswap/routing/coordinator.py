"""Leg transition state machine for boost swaps.

Flow:
1. Leg 1 (atomic swap) drives the swap from INITIATED up to
   WAITING_FOR_CLAIM_CONFIRMATIONS
2. Once the claim confirms, the swap is handed to leg 2 by moving it to
   APPROVE_CONFIRMED (the DEX leg's first actionable status)
3. Leg 2 (DEX aggregator) drives it to SUCCESS or FAILED

The caller owns the polling loop and must not run two steps of the same
swap concurrently.
"""

import logging
import time
from typing import Any, Mapping, Optional

from bridgeswap.routing.adapters import (
    atomic_leg_swap,
    atomic_leg_updates,
    dex_leg_swap,
    dex_leg_updates,
)
from bridgeswap.routing.base import (
    AtomicSwapLeg,
    DexAggregatorLeg,
    LegSwap,
    Swap,
    SwapUpdate,
)
from bridgeswap.routing.statuses import StatusDescriptor
from bridgeswap.utils.polling import with_interval

logger = logging.getLogger(__name__)

HANDOFF_STATUS = "WAITING_FOR_CLAIM_CONFIRMATIONS"
BRIDGING_STATUS = "APPROVE_CONFIRMED"

# Statuses that only the DEX leg knows about; SUCCESS is shared and stays with leg 1
DEX_PHASE_STATUSES = frozenset(DexAggregatorLeg.statuses) - frozenset(AtomicSwapLeg.statuses)


class LegTransitionCoordinator:
    """Decides which leg advances a swap and performs the leg handoff."""

    def __init__(
        self,
        atomic_leg: AtomicSwapLeg,
        dex_leg: DexAggregatorLeg,
        statuses: Mapping[str, StatusDescriptor],
        slippage_percentage: int,
        poll_min_interval: float = 15.0,
        poll_max_interval: float = 30.0,
        poll_max_attempts: int = 4,
    ):
        self.atomic_leg = atomic_leg
        self.dex_leg = dex_leg
        self.statuses = statuses
        self.slippage_percentage = slippage_percentage
        self.poll_min_interval = poll_min_interval
        self.poll_max_interval = poll_max_interval
        self.poll_max_attempts = poll_max_attempts

    async def _finalize_atomic_leg(
        self,
        swap: LegSwap,
        network: str,
        wallet_id: str,
    ) -> Optional[SwapUpdate]:
        """Move the swap to leg 2 once leg 1's claim has confirmed."""
        result = await self.atomic_leg.wait_for_claim_confirmations(swap, network, wallet_id)
        if result and result.get("status") == "SUCCESS":
            logger.info(f"Swap {swap.id}: {swap.to_asset} claim confirmed, starting {self.dex_leg.name}")
            return {
                "end_time": int(time.time() * 1000),
                "status": BRIDGING_STATUS,
            }
        return None

    async def perform_next_swap_action(
        self,
        store: Any,
        network: str,
        wallet_id: str,
        swap: Swap,
    ) -> Optional[SwapUpdate]:
        """
        Advance a boost swap by one step.

        Returns:
            Field updates to apply to the swap, or None if nothing changed
        """
        descriptor = self.statuses.get(swap.status)
        if descriptor is not None and descriptor.is_terminal:
            logger.debug(f"Swap {swap.id} is already {swap.status}")
            return None

        atomic_swap = atomic_leg_swap(swap, self.slippage_percentage)
        dex_swap = dex_leg_swap(swap, self.slippage_percentage)

        if swap.status == HANDOFF_STATUS:
            updates = await with_interval(
                lambda: self._finalize_atomic_leg(atomic_swap, network, wallet_id),
                min_interval=self.poll_min_interval,
                max_interval=self.poll_max_interval,
                max_attempts=self.poll_max_attempts,
                operation=f"claim confirmations for swap {swap.id}",
            )
            if not updates:
                logger.info(f"Swap {swap.id}: claim not confirmed yet, still {HANDOFF_STATUS}")
        else:
            updates = atomic_leg_updates(
                await self.atomic_leg.perform_next_swap_action(store, network, wallet_id, atomic_swap)
            )

        if not updates and swap.status in DEX_PHASE_STATUSES:
            updates = dex_leg_updates(
                await self.dex_leg.perform_next_swap_action(store, network, wallet_id, dex_swap)
            )

        if updates:
            logger.debug(f"Swap {swap.id}: {swap.status} -> {updates.get('status', swap.status)}")
        return updates or None
