"""Routing module for boost swaps.

A boost swap chains two engines:
- Atomic swap (leg 1): source native asset -> bridge native asset
- DEX aggregator (leg 2): bridge native asset -> destination token
"""

from bridgeswap.routing.base import (
    AtomicSwapLeg,
    DexAggregatorLeg,
    FeeEstimator,
    LegQuote,
    LegSwap,
    Quote,
    QuoteProvider,
    Swap,
    SwapDriver,
    SwapLeg,
)
from bridgeswap.routing.boost import BOOST_STATUSES, BOOST_TX_TYPES, BoostSwapProvider
from bridgeswap.routing.coordinator import LegTransitionCoordinator
from bridgeswap.routing.dry_run import SimulatedAtomicSwapLeg, SimulatedDexLeg
from bridgeswap.routing.factory import create_boost_provider
from bridgeswap.routing.fees import FeeAggregator
from bridgeswap.routing.quotes import QuoteAggregator
from bridgeswap.routing.statuses import (
    StatusDescriptor,
    StatusKind,
    StatusOverride,
    StatusTableError,
    build_status_table,
)

__all__ = [
    # Records
    "Quote",
    "LegQuote",
    "Swap",
    "LegSwap",
    # Leg contracts
    "QuoteProvider",
    "FeeEstimator",
    "SwapDriver",
    "SwapLeg",
    "AtomicSwapLeg",
    "DexAggregatorLeg",
    # Boost swap
    "BoostSwapProvider",
    "BOOST_STATUSES",
    "BOOST_TX_TYPES",
    "QuoteAggregator",
    "FeeAggregator",
    "LegTransitionCoordinator",
    # Status tables
    "StatusDescriptor",
    "StatusKind",
    "StatusOverride",
    "StatusTableError",
    "build_status_table",
    # Simulated legs
    "SimulatedAtomicSwapLeg",
    "SimulatedDexLeg",
    "create_boost_provider",
]
