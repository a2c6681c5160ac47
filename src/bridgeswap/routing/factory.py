"""Factory for creating boost swap providers.

Wires injected leg engines into a provider, falling back to the simulated
legs when none are given.
"""

import logging
from typing import Optional

from bridgeswap.config import get_settings
from bridgeswap.routing.base import AtomicSwapLeg, DexAggregatorLeg
from bridgeswap.routing.boost import BoostSwapProvider

logger = logging.getLogger(__name__)


def create_atomic_swap_leg() -> AtomicSwapLeg:
    """Create the default atomic swap leg (simulated)."""
    settings = get_settings()
    from bridgeswap.routing.dry_run import SimulatedAtomicSwapLeg
    return SimulatedAtomicSwapLeg(gas_units=settings.simulated_gas_units)


def create_dex_leg() -> DexAggregatorLeg:
    """Create the default DEX aggregator leg (simulated)."""
    settings = get_settings()
    from bridgeswap.routing.dry_run import SimulatedDexLeg
    return SimulatedDexLeg(gas_units=settings.simulated_gas_units)


def create_boost_provider(
    atomic_leg: Optional[AtomicSwapLeg] = None,
    dex_leg: Optional[DexAggregatorLeg] = None,
    slippage_percentage: Optional[int] = None,
) -> BoostSwapProvider:
    """Create a boost swap provider.

    Args:
        atomic_leg: Leg 1 engine (simulated if not given)
        dex_leg: Leg 2 engine (simulated if not given)
        slippage_percentage: Override for the configured boost slippage

    Returns:
        Configured BoostSwapProvider
    """
    settings = get_settings()

    if atomic_leg is None or dex_leg is None:
        if settings.is_production:
            logger.error("No swap legs configured in production, using simulated legs")
        elif not settings.dry_run:
            logger.warning("No swap legs configured outside dry-run mode, using simulated legs")
        atomic_leg = atomic_leg or create_atomic_swap_leg()
        dex_leg = dex_leg or create_dex_leg()

    logger.info(f"Created boost provider: {atomic_leg.name} -> {dex_leg.name}")
    return BoostSwapProvider(atomic_leg, dex_leg, slippage_percentage=slippage_percentage)
