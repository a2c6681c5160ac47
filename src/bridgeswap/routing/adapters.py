"""Field remapping between boost swap records and each leg's shape, both ways.

Leg 1 (atomic swap) sees the boost swap as ``from_asset -> bridge_asset``.
Leg 2 (DEX aggregator) sees it as ``bridge_asset -> to_asset``, spent from
the account that received the bridge asset. Updates a leg reports in its
own shape are renamed back before they touch the boost record.
"""

from typing import Optional

from bridgeswap.routing.base import LegQuote, LegSwap, Quote, Swap, SwapUpdate


def atomic_leg_quote(quote: Quote) -> LegQuote:
    """Reshape a boost quote for the atomic swap leg."""
    return LegQuote(
        from_asset=quote.from_asset,
        to_asset=quote.bridge_asset,
        from_amount=quote.from_amount,
        to_amount=quote.bridge_asset_amount,
        from_account_id=quote.from_account_id,
        to_account_id=quote.to_account_id,
    )


def dex_leg_quote(quote: Quote, slippage_percentage: int) -> LegQuote:
    """Reshape a boost quote for the DEX aggregator leg."""
    return LegQuote(
        from_asset=quote.bridge_asset,
        to_asset=quote.to_asset,
        from_amount=quote.bridge_asset_amount,
        to_amount=quote.to_amount,
        from_account_id=quote.to_account_id,
        to_account_id=quote.to_account_id,
        slippage_percentage=slippage_percentage,
    )


def atomic_leg_swap(swap: Swap, slippage_percentage: int) -> LegSwap:
    """Reshape a boost swap for the atomic swap leg."""
    return LegSwap(
        id=swap.id,
        status=swap.status,
        from_asset=swap.from_asset,
        to_asset=swap.bridge_asset,
        from_amount=swap.from_amount,
        to_amount=swap.bridge_asset_amount,
        slippage_percentage=slippage_percentage,
        from_account_id=swap.from_account_id,
        to_account_id=swap.to_account_id,
        extra=dict(swap.extra),
    )


def dex_leg_swap(swap: Swap, slippage_percentage: int) -> LegSwap:
    """Reshape a boost swap for the DEX aggregator leg."""
    return LegSwap(
        id=swap.id,
        status=swap.status,
        from_asset=swap.bridge_asset,
        to_asset=swap.to_asset,
        from_amount=swap.bridge_asset_amount,
        to_amount=swap.to_amount,
        slippage_percentage=slippage_percentage,
        from_account_id=swap.to_account_id,
        to_account_id=swap.to_account_id,
        extra=dict(swap.extra),
    )


# Leg field -> boost field, for fields whose meaning differs between shapes
ATOMIC_LEG_UPDATE_FIELDS = {
    "to_asset": "bridge_asset",
    "to_amount": "bridge_asset_amount",
}

DEX_LEG_UPDATE_FIELDS = {
    "from_asset": "bridge_asset",
    "from_amount": "bridge_asset_amount",
    "from_account_id": "to_account_id",
}


def _rename_fields(updates: Optional[SwapUpdate], names: dict[str, str]) -> Optional[SwapUpdate]:
    if updates is None:
        return None
    return {names.get(key, key): value for key, value in updates.items()}


def atomic_leg_updates(updates: Optional[SwapUpdate]) -> Optional[SwapUpdate]:
    """Translate an atomic swap leg update back into boost swap fields."""
    return _rename_fields(updates, ATOMIC_LEG_UPDATE_FIELDS)


def dex_leg_updates(updates: Optional[SwapUpdate]) -> Optional[SwapUpdate]:
    """Translate a DEX aggregator leg update back into boost swap fields."""
    return _rename_fields(updates, DEX_LEG_UPDATE_FIELDS)
