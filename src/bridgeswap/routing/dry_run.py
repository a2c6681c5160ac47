"""Simulated swap legs for dry runs and tests.

Quotes come from a static price table; each call to
``perform_next_swap_action`` moves the swap exactly one status forward, so
a dry run walks through every status a real engine would report.
"""

import logging
import secrets
import time
import uuid
from decimal import ROUND_DOWN, Decimal
from typing import Any, Optional

from bridgeswap.assets import ASSETS, currency_to_unit, get_asset, get_native_asset
from bridgeswap.routing.base import (
    AtomicSwapLeg,
    DexAggregatorLeg,
    FeeVector,
    LegQuote,
    LegSwap,
    SwapUpdate,
)

logger = logging.getLogger(__name__)


# Simulated market prices in USD, for demonstration only
SIMULATED_PRICES: dict[str, Decimal] = {
    "BTC": Decimal("100000.00"),
    "LTC": Decimal("115.00"),
    "ETH": Decimal("3900.00"),
    "BNB": Decimal("710.00"),
    "MATIC": Decimal("0.62"),
    "AVAX": Decimal("52.00"),
    "DAI": Decimal("1.00"),
    "USDT": Decimal("1.00"),
    "USDC": Decimal("1.00"),
    "WBTC": Decimal("100000.00"),
    "UNI": Decimal("17.50"),
    "CAKE": Decimal("2.80"),
    "QUICK": Decimal("0.05"),
}


def _new_tx_hash() -> str:
    return f"0x{secrets.token_hex(32)}"


def _now_ms() -> int:
    return int(time.time() * 1000)


class _SimulatedLegMixin:
    """Pricing and fee helpers shared by the simulated legs."""

    prices: dict[str, Decimal]
    fee_percent: Decimal
    gas_units: int

    def _convert(self, from_asset: str, to_asset: str, amount: Decimal) -> Optional[Decimal]:
        """Convert a human amount of from_asset into to_asset smallest units."""
        from_price = self.prices.get(from_asset.upper())
        to_price = self.prices.get(to_asset.upper())
        if from_price is None or to_price is None:
            return None

        to_quantity = amount * from_price / to_price * (1 - self.fee_percent)
        return currency_to_unit(to_asset, to_quantity).to_integral_value(rounding=ROUND_DOWN)

    def _fees(self, tx_type: str, fee_prices: list[Decimal]) -> FeeVector:
        # Transactions of the other leg cost this engine nothing
        if tx_type not in self.tx_types:
            return {}
        # fee price is in gwei-style units per gas unit
        return {
            price: Decimal(self.gas_units) * Decimal(str(price)) / Decimal(10**9)
            for price in fee_prices
        }


class SimulatedAtomicSwapLeg(_SimulatedLegMixin, AtomicSwapLeg):
    """Atomic swap leg that settles every step instantly."""

    # status -> (next status, field that receives a fresh tx hash)
    TRANSITIONS: dict[str, tuple[str, Optional[str]]] = {
        "INITIATED": ("INITIATION_REPORTED", "from_funding_hash"),
        "INITIATION_REPORTED": ("INITIATION_CONFIRMED", None),
        "INITIATION_CONFIRMED": ("FUNDED", None),
        "FUNDED": ("CONFIRM_COUNTER_PARTY_INITIATION", "to_funding_hash"),
        "CONFIRM_COUNTER_PARTY_INITIATION": ("READY_TO_CLAIM", None),
        "READY_TO_CLAIM": ("WAITING_FOR_CLAIM_CONFIRMATIONS", "to_claim_hash"),
    }

    def __init__(
        self,
        prices: Optional[dict[str, Decimal]] = None,
        fee_percent: Decimal = Decimal("0.0"),
        gas_units: int = 200000,
        claim_confirmations: int = 1,
    ):
        self.prices = SIMULATED_PRICES.copy() if prices is None else prices
        self.fee_percent = fee_percent
        self.gas_units = gas_units
        self.claim_confirmations = claim_confirmations
        self._confirmations: dict[str, int] = {}

    @property
    def name(self) -> str:
        return "simulated_atomic_swap"

    async def get_quote(
        self,
        network: str,
        from_asset: str,
        to_asset: str,
        amount: Decimal,
    ) -> Optional[LegQuote]:
        if amount <= 0:
            return None
        # Atomic swaps only move native assets across chains
        if from_asset.upper() not in ASSETS or to_asset.upper() not in ASSETS:
            return None
        if get_native_asset(from_asset) != from_asset.upper() or get_native_asset(to_asset) != to_asset.upper():
            return None

        to_amount = self._convert(from_asset, to_asset, amount)
        if not to_amount:
            return None

        return LegQuote(
            from_asset=from_asset.upper(),
            to_asset=to_asset.upper(),
            from_amount=amount,
            to_amount=to_amount,
        )

    async def new_swap(self, network: str, wallet_id: str, quote: LegQuote) -> SwapUpdate:
        swap_id = uuid.uuid4().hex
        logger.info(f"[dry-run] atomic swap {swap_id}: {quote.from_amount} {quote.from_asset} -> {quote.to_asset}")
        return {
            "id": swap_id,
            "status": "INITIATED",
            "from_asset": quote.from_asset,
            "to_asset": quote.to_asset,
            "from_amount": quote.from_amount,
            "to_amount": quote.to_amount,
            "secret_hash": secrets.token_hex(32),
            "start_time": _now_ms(),
        }

    async def estimate_fees(
        self,
        network: str,
        wallet_id: str,
        asset: str,
        tx_type: str,
        quote: LegQuote,
        fee_prices: list[Decimal],
        is_max: bool = False,
    ) -> FeeVector:
        return self._fees(tx_type, fee_prices)

    async def wait_for_claim_confirmations(
        self,
        swap: LegSwap,
        network: str,
        wallet_id: str,
    ) -> Optional[SwapUpdate]:
        seen = self._confirmations.get(swap.id, 0) + 1
        self._confirmations[swap.id] = seen
        if seen < self.claim_confirmations:
            return None

        self._confirmations.pop(swap.id, None)
        return {"end_time": _now_ms(), "status": "SUCCESS"}

    async def perform_next_swap_action(
        self,
        store: Any,
        network: str,
        wallet_id: str,
        swap: LegSwap,
    ) -> Optional[SwapUpdate]:
        if swap.status == "WAITING_FOR_CLAIM_CONFIRMATIONS":
            return await self.wait_for_claim_confirmations(swap, network, wallet_id)

        transition = self.TRANSITIONS.get(swap.status)
        if transition is None:
            return None

        next_status, hash_field = transition
        updates: SwapUpdate = {"status": next_status}
        if hash_field:
            updates[hash_field] = _new_tx_hash()
        return updates


class SimulatedDexLeg(_SimulatedLegMixin, DexAggregatorLeg):
    """DEX aggregator leg that fills at the simulated price."""

    def __init__(
        self,
        prices: Optional[dict[str, Decimal]] = None,
        fee_percent: Decimal = Decimal("0.003"),
        gas_units: int = 200000,
        fail_swaps: bool = False,
    ):
        self.prices = SIMULATED_PRICES.copy() if prices is None else prices
        self.fee_percent = fee_percent
        self.gas_units = gas_units
        self.fail_swaps = fail_swaps

    @property
    def name(self) -> str:
        return "simulated_dex"

    async def get_quote(
        self,
        network: str,
        from_asset: str,
        to_asset: str,
        amount: Decimal,
    ) -> Optional[LegQuote]:
        if amount <= 0:
            return None
        if from_asset.upper() not in ASSETS or to_asset.upper() not in ASSETS:
            return None
        # Same-chain only
        if get_asset(from_asset).chain != get_asset(to_asset).chain:
            return None

        to_amount = self._convert(from_asset, to_asset, amount)
        if not to_amount:
            return None

        return LegQuote(
            from_asset=from_asset.upper(),
            to_asset=to_asset.upper(),
            from_amount=amount,
            to_amount=to_amount,
        )

    async def estimate_fees(
        self,
        network: str,
        wallet_id: str,
        asset: str,
        tx_type: str,
        quote: LegQuote,
        fee_prices: list[Decimal],
        is_max: bool = False,
    ) -> FeeVector:
        return self._fees(tx_type, fee_prices)

    async def perform_next_swap_action(
        self,
        store: Any,
        network: str,
        wallet_id: str,
        swap: LegSwap,
    ) -> Optional[SwapUpdate]:
        if swap.status == "WAITING_FOR_APPROVE_CONFIRMATIONS":
            return {"status": "APPROVE_CONFIRMED"}

        if swap.status == "APPROVE_CONFIRMED":
            logger.info(
                f"[dry-run] DEX swap {swap.id}: {swap.from_amount} {swap.from_asset} -> {swap.to_asset} "
                f"(slippage {swap.slippage_percentage}%)"
            )
            return {"status": "WAITING_FOR_SWAP_CONFIRMATIONS", "swap_tx_hash": _new_tx_hash()}

        if swap.status == "WAITING_FOR_SWAP_CONFIRMATIONS":
            if self.fail_swaps:
                return {"status": "FAILED", "end_time": _now_ms()}
            return {"status": "SUCCESS", "end_time": _now_ms()}

        return None
