"""Swap records and the contracts every swap leg engine implements."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any, Mapping, Optional

from bridgeswap.routing.statuses import (
    ATOMIC_SWAP_STATUSES,
    DEX_SWAP_STATUSES,
    StatusDescriptor,
)

# Fee category (fee price level) -> fee amount
FeeVector = dict[Any, Decimal]

# Field name -> new value, applied to a swap record by the caller
SwapUpdate = dict[str, Any]


@dataclass(frozen=True)
class LegQuote:
    """A quote as produced or consumed by a single leg engine."""

    from_asset: str
    to_asset: str
    from_amount: Decimal
    to_amount: Decimal
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None
    slippage_percentage: Optional[int] = None


@dataclass(frozen=True)
class Quote:
    """A two-leg boost quote.

    ``bridge_asset_amount`` is leg 1's output in the bridge asset's smallest
    unit; ``to_amount`` is leg 2's output, the amount finally delivered.
    """

    from_asset: str
    to_asset: str
    from_amount: Decimal
    to_amount: Decimal
    bridge_asset: str
    bridge_asset_amount: Decimal
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None


@dataclass
class LegSwap:
    """A swap record reshaped for one leg engine.

    ``extra`` carries the leg's own transient fields (escrow addresses,
    transaction hashes, confirmation counts) untouched.
    """

    id: str
    status: str
    from_asset: str
    to_asset: str
    from_amount: Decimal
    to_amount: Decimal
    slippage_percentage: int
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None
    extra: dict = field(default_factory=dict)


@dataclass
class Swap:
    """An in-flight boost swap.

    Mutated in place from the updates returned by each continuation step
    until it reaches a terminal status.
    """

    id: str
    status: str
    from_asset: str
    to_asset: str
    from_amount: Decimal
    to_amount: Decimal
    bridge_asset: str
    bridge_asset_amount: Decimal
    slippage: int  # basis points
    network: Optional[str] = None
    wallet_id: Optional[str] = None
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    extra: dict = field(default_factory=dict)

    def apply_updates(self, updates: Optional[SwapUpdate]) -> None:
        """Apply a continuation update field by field.

        Known fields are set as attributes, anything else lands in ``extra``.
        """
        if not updates:
            return
        known = {f.name for f in fields(self)} - {"extra"}
        for key, value in updates.items():
            if key in known:
                setattr(self, key, value)
            else:
                self.extra[key] = value


class QuoteProvider(ABC):
    """Leg capability: quoting a pair."""

    @abstractmethod
    async def get_quote(
        self,
        network: str,
        from_asset: str,
        to_asset: str,
        amount: Decimal,
    ) -> Optional[LegQuote]:
        """
        Get a quote for this leg.

        Returns:
            LegQuote if the pair is routable, None otherwise
        """
        pass


class FeeEstimator(ABC):
    """Leg capability: estimating transaction fees."""

    @abstractmethod
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
        """
        Estimate fees of one transaction type, one entry per fee price.

        Args:
            asset: Asset the fee is being shown for
            tx_type: Transaction type from the leg's ``tx_types``
            quote: Quote in this leg's shape
            fee_prices: Fee price levels to estimate at
            is_max: Whether the user is spending the full balance
        """
        pass


class SwapDriver(ABC):
    """Leg capability: advancing a swap by one step."""

    @abstractmethod
    async def perform_next_swap_action(
        self,
        store: Any,
        network: str,
        wallet_id: str,
        swap: LegSwap,
    ) -> Optional[SwapUpdate]:
        """
        Perform the next action for the swap's current status.

        Returns:
            Field updates, or None if there is nothing to do yet
        """
        pass


class SwapLeg(QuoteProvider, FeeEstimator, SwapDriver):
    """A complete leg engine."""

    tx_types: dict[str, str] = {}
    statuses: Mapping[str, StatusDescriptor] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Leg engine name identifier."""
        pass


class AtomicSwapLeg(SwapLeg):
    """Cross-chain atomic swap engine (escrow, claim, refund).

    Leg 1 of a boost swap: native asset -> bridge native asset.
    """

    tx_types = {
        "SWAP_INITIATION": "SWAP_INITIATION",
        "SWAP_CLAIM": "SWAP_CLAIM",
    }
    statuses = ATOMIC_SWAP_STATUSES

    @abstractmethod
    async def new_swap(self, network: str, wallet_id: str, quote: LegQuote) -> SwapUpdate:
        """
        Initiate a swap from a quote.

        Returns:
            Initial swap fields; must include ``id``, ``status`` and ``to_amount``
        """
        pass

    @abstractmethod
    async def wait_for_claim_confirmations(
        self,
        swap: LegSwap,
        network: str,
        wallet_id: str,
    ) -> Optional[SwapUpdate]:
        """
        Check whether the claim transaction has confirmed.

        Returns:
            Updates with ``status == "SUCCESS"`` once confirmed, None before
        """
        pass


class DexAggregatorLeg(SwapLeg):
    """Same-chain DEX aggregator engine (approve, swap).

    Leg 2 of a boost swap: bridge native asset -> token.
    """

    tx_types = {
        "APPROVE": "APPROVE",
        "SWAP": "SWAP",
    }
    statuses = DEX_SWAP_STATUSES
