"""Two-leg quote composition."""

import logging
from decimal import Decimal
from typing import Optional

from bridgeswap.assets import get_native_asset, is_token, unit_to_currency
from bridgeswap.routing.base import AtomicSwapLeg, DexAggregatorLeg, Quote

logger = logging.getLogger(__name__)


class QuoteAggregator:
    """Quotes native -> token by chaining an atomic swap and a DEX swap.

    Leg 1 swaps the source asset for the native asset of the token's chain
    (the bridge asset); leg 2 swaps the bridge asset for the token.
    """

    def __init__(self, atomic_leg: AtomicSwapLeg, dex_leg: DexAggregatorLeg):
        self.atomic_leg = atomic_leg
        self.dex_leg = dex_leg

    @staticmethod
    def is_supported_pair(from_asset: str, to_asset: str, amount: Decimal) -> bool:
        """Boost routes only exist for native -> token with a positive amount."""
        return not is_token(from_asset) and is_token(to_asset) and amount > 0

    async def get_quote(
        self,
        network: str,
        from_asset: str,
        to_asset: str,
        amount: Decimal,
    ) -> Optional[Quote]:
        """
        Get a composite quote.

        Returns:
            Quote if both legs can route, None otherwise
        """
        if not self.is_supported_pair(from_asset, to_asset, amount):
            logger.debug(f"Boost route not applicable: {amount} {from_asset} -> {to_asset}")
            return None

        bridge_asset = get_native_asset(to_asset)

        atomic_quote = await self.atomic_leg.get_quote(network, from_asset, bridge_asset, amount)
        if not atomic_quote:
            logger.info(f"{self.atomic_leg.name} has no route for {from_asset} -> {bridge_asset}")
            return None

        bridge_quantity = unit_to_currency(bridge_asset, atomic_quote.to_amount)

        dex_quote = await self.dex_leg.get_quote(network, bridge_asset, to_asset, bridge_quantity)
        if not dex_quote:
            logger.info(f"{self.dex_leg.name} has no route for {bridge_quantity} {bridge_asset} -> {to_asset}")
            return None

        quote = Quote(
            from_asset=from_asset,
            to_asset=to_asset,
            from_amount=atomic_quote.from_amount,
            to_amount=dex_quote.to_amount,
            bridge_asset=bridge_asset,
            bridge_asset_amount=atomic_quote.to_amount,
        )
        logger.info(
            f"Boost quote: {quote.from_amount} {from_asset} -> {quote.bridge_asset_amount} {bridge_asset} "
            f"-> {quote.to_amount} {to_asset}"
        )
        return quote
