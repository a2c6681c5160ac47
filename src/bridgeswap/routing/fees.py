"""Fee estimation across both legs of a boost swap."""

import logging
from decimal import Decimal

from bridgeswap.assets import is_token
from bridgeswap.routing.adapters import atomic_leg_quote, dex_leg_quote
from bridgeswap.routing.base import AtomicSwapLeg, DexAggregatorLeg, FeeVector, Quote

logger = logging.getLogger(__name__)


def sum_fee_vectors(first: FeeVector, second: FeeVector) -> FeeVector:
    """Add two fee vectors key by key.

    The result covers the union of both key sets; a key missing from one
    vector counts as zero there.
    """
    total: FeeVector = {}
    for key in list(first) + [k for k in second if k not in first]:
        total[key] = Decimal(str(first.get(key, 0))) + Decimal(str(second.get(key, 0)))
    return total


class FeeAggregator:
    """Estimates the fees a boost swap action will cost.

    Leg 1 fees always apply. When the user claims the bridge asset for a
    token destination, the claim is immediately followed by the leg 2 swap
    from the same wallet, so both legs' fees are shown together.
    """

    def __init__(
        self,
        atomic_leg: AtomicSwapLeg,
        dex_leg: DexAggregatorLeg,
        slippage_percentage: int,
    ):
        self.atomic_leg = atomic_leg
        self.dex_leg = dex_leg
        self.slippage_percentage = slippage_percentage

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
        """
        Estimate fees for a boost swap transaction.

        Args:
            asset: Asset the fee is being shown for
            tx_type: One of the boost ``tx_types``
            quote: Boost quote (or swap) being estimated
            fee_prices: Fee price levels to estimate at
            is_max: Whether the user is spending the full balance

        Returns:
            Fee vector keyed by fee price level
        """
        atomic_fees = await self.atomic_leg.estimate_fees(
            network,
            wallet_id,
            asset,
            tx_type,
            atomic_leg_quote(quote),
            fee_prices,
            is_max,
        )

        if not (is_token(asset) and tx_type == AtomicSwapLeg.tx_types["SWAP_CLAIM"]):
            return atomic_fees

        dex_fees = await self.dex_leg.estimate_fees(
            network,
            wallet_id,
            asset,
            DexAggregatorLeg.tx_types["SWAP"],
            dex_leg_quote(quote, self.slippage_percentage),
            fee_prices,
            is_max,
        )

        missing = set(dex_fees) ^ set(atomic_fees)
        if missing:
            logger.warning(f"Fee vectors differ on keys {sorted(map(str, missing))}, treating missing as zero")

        return sum_fee_vectors(atomic_fees, dex_fees)
