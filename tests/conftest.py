"""Pytest configuration and fixtures."""

import os
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["DRY_RUN"] = "true"
os.environ["CLAIM_POLL_INTERVAL_MIN_SECONDS"] = "0"
os.environ["CLAIM_POLL_INTERVAL_MAX_SECONDS"] = "0"
os.environ["CLAIM_POLL_MAX_ATTEMPTS"] = "3"

from bridgeswap.config import get_settings
from bridgeswap.routing.base import AtomicSwapLeg, DexAggregatorLeg, Quote, Swap
from bridgeswap.routing.boost import BoostSwapProvider

get_settings.cache_clear()


def make_atomic_leg() -> MagicMock:
    """Atomic swap leg double; every engine call returns None by default."""
    leg = MagicMock(spec=AtomicSwapLeg)
    leg.name = "atomic"
    leg.get_quote = AsyncMock(return_value=None)
    leg.new_swap = AsyncMock(return_value=None)
    leg.estimate_fees = AsyncMock(return_value={})
    leg.perform_next_swap_action = AsyncMock(return_value=None)
    leg.wait_for_claim_confirmations = AsyncMock(return_value=None)
    return leg


def make_dex_leg() -> MagicMock:
    """DEX aggregator leg double; every engine call returns None by default."""
    leg = MagicMock(spec=DexAggregatorLeg)
    leg.name = "dex"
    leg.get_quote = AsyncMock(return_value=None)
    leg.estimate_fees = AsyncMock(return_value={})
    leg.perform_next_swap_action = AsyncMock(return_value=None)
    return leg


@pytest.fixture
def atomic_leg() -> MagicMock:
    return make_atomic_leg()


@pytest.fixture
def dex_leg() -> MagicMock:
    return make_dex_leg()


@pytest.fixture
def provider(atomic_leg, dex_leg) -> BoostSwapProvider:
    """Boost provider over the leg doubles."""
    return BoostSwapProvider(atomic_leg, dex_leg)


@pytest.fixture
def boost_quote() -> Quote:
    """1 BTC -> 3 ETH -> 3000 DAI."""
    return Quote(
        from_asset="BTC",
        to_asset="DAI",
        from_amount=Decimal("1"),
        to_amount=Decimal("3000000000"),
        bridge_asset="ETH",
        bridge_asset_amount=Decimal("3000000000000000000"),
        from_account_id="btc-account",
        to_account_id="eth-account",
    )


@pytest.fixture
def make_swap():
    """Build a boost swap in a given status."""

    def _make(status: str, **extra) -> Swap:
        return Swap(
            id="swap-1",
            status=status,
            from_asset="BTC",
            to_asset="DAI",
            from_amount=Decimal("1"),
            to_amount=Decimal("3000000000"),
            bridge_asset="ETH",
            bridge_asset_amount=Decimal("3000000000000000000"),
            slippage=300,
            network="mainnet",
            wallet_id="wallet-1",
            from_account_id="btc-account",
            to_account_id="eth-account",
            extra=dict(extra),
        )

    return _make
