"""Asset definitions and unit helpers.

Every asset is either a native chain asset (pays its own transaction costs)
or a token hosted on a native chain. Amounts move between legs in the
asset's smallest unit (satoshi, wei, ...) and are converted to human
denominations where an engine expects them.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


class UnknownAssetError(Exception):
    """Raised when an asset code is not in the asset table."""

    pass


@dataclass(frozen=True)
class AssetInfo:
    """Definition of a supported asset."""

    code: str
    chain: str
    decimals: int
    # None for native assets, otherwise the native asset of the host chain
    native_asset: Optional[str] = None

    @property
    def is_token(self) -> bool:
        return self.native_asset is not None


# ======================
# Asset Table
# ======================

ASSETS: dict[str, AssetInfo] = {
    # Native assets
    "BTC": AssetInfo(code="BTC", chain="bitcoin", decimals=8),
    "LTC": AssetInfo(code="LTC", chain="litecoin", decimals=8),
    "ETH": AssetInfo(code="ETH", chain="ethereum", decimals=18),
    "BNB": AssetInfo(code="BNB", chain="bsc", decimals=18),
    "MATIC": AssetInfo(code="MATIC", chain="polygon", decimals=18),
    "AVAX": AssetInfo(code="AVAX", chain="avalanche", decimals=18),

    # Ethereum tokens
    "DAI": AssetInfo(code="DAI", chain="ethereum", decimals=18, native_asset="ETH"),
    "USDT": AssetInfo(code="USDT", chain="ethereum", decimals=6, native_asset="ETH"),
    "USDC": AssetInfo(code="USDC", chain="ethereum", decimals=6, native_asset="ETH"),
    "WBTC": AssetInfo(code="WBTC", chain="ethereum", decimals=8, native_asset="ETH"),
    "UNI": AssetInfo(code="UNI", chain="ethereum", decimals=18, native_asset="ETH"),

    # BNB Chain tokens
    "CAKE": AssetInfo(code="CAKE", chain="bsc", decimals=18, native_asset="BNB"),

    # Polygon tokens
    "QUICK": AssetInfo(code="QUICK", chain="polygon", decimals=18, native_asset="MATIC"),
}


def get_asset(code: str) -> AssetInfo:
    """Look up an asset by code.

    Raises:
        UnknownAssetError: if the code is not supported
    """
    asset = ASSETS.get(code.upper())
    if asset is None:
        raise UnknownAssetError(f"Unknown asset: {code}")
    return asset


def is_token(code: str) -> bool:
    """Check if an asset is token-style (needs a host native asset for fees).

    Unknown assets are not tokens.
    """
    asset = ASSETS.get(code.upper())
    return asset is not None and asset.is_token


def get_native_asset(code: str) -> str:
    """Get the native asset of the chain hosting ``code``.

    Native assets map to themselves.
    """
    asset = get_asset(code)
    return asset.native_asset or asset.code


def unit_to_currency(code: str, amount) -> Decimal:
    """Convert a smallest-unit amount into a human-denominated decimal."""
    asset = get_asset(code)
    return Decimal(str(amount)) / (Decimal(10) ** asset.decimals)


def currency_to_unit(code: str, amount) -> Decimal:
    """Convert a human-denominated amount into the asset's smallest unit."""
    asset = get_asset(code)
    return Decimal(str(amount)) * (Decimal(10) ** asset.decimals)


def pretty_balance(amount, code: str, places: int = 6) -> str:
    """Format a smallest-unit amount for display.

    Trailing zeros are dropped, e.g. 1500000000000000000 wei -> "1.5".
    """
    value = unit_to_currency(code, amount)
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum).normalize()
    # normalize() turns whole numbers into exponent form (e.g. 3E+1)
    return f"{rounded:f}"
