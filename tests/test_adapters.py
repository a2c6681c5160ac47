"""Tests for field remapping between boost swaps and leg shapes."""

from decimal import Decimal

from bridgeswap.routing.adapters import (
    atomic_leg_quote,
    atomic_leg_swap,
    atomic_leg_updates,
    dex_leg_quote,
    dex_leg_swap,
    dex_leg_updates,
)


class TestLegViews:
    """Tests for boost record -> leg shape."""

    def test_atomic_leg_quote(self, boost_quote):
        """Test leg 1 quotes source -> bridge asset."""
        quote = atomic_leg_quote(boost_quote)

        assert (quote.from_asset, quote.to_asset) == ("BTC", "ETH")
        assert quote.from_amount == Decimal("1")
        assert quote.to_amount == Decimal("3000000000000000000")
        assert quote.from_account_id == "btc-account"

    def test_dex_leg_quote(self, boost_quote):
        """Test leg 2 quotes bridge asset -> destination from the receiving account."""
        quote = dex_leg_quote(boost_quote, 3)

        assert (quote.from_asset, quote.to_asset) == ("ETH", "DAI")
        assert quote.from_amount == Decimal("3000000000000000000")
        assert quote.to_amount == Decimal("3000000000")
        assert quote.from_account_id == "eth-account"
        assert quote.slippage_percentage == 3

    def test_leg_swaps_copy_extra(self, make_swap):
        """Test leg views can't modify the boost record's extra fields."""
        swap = make_swap("FUNDED", secret_hash="cafe")

        atomic_leg_swap(swap, 3).extra["secret_hash"] = "changed"
        dex_leg_swap(swap, 3).extra["other"] = 1

        assert swap.extra == {"secret_hash": "cafe"}


class TestLegUpdates:
    """Tests for leg update -> boost record fields."""

    def test_atomic_leg_updates(self):
        """Test leg 1 destination fields map onto the bridge fields."""
        updates = atomic_leg_updates({
            "status": "READY_TO_CLAIM",
            "to_asset": "ETH",
            "to_amount": Decimal("2990000000000000000"),
            "from_amount": Decimal("1"),
            "to_funding_hash": "0xabc",
        })

        assert updates == {
            "status": "READY_TO_CLAIM",
            "bridge_asset": "ETH",
            "bridge_asset_amount": Decimal("2990000000000000000"),
            "from_amount": Decimal("1"),
            "to_funding_hash": "0xabc",
        }

    def test_dex_leg_updates(self):
        """Test leg 2 source fields map onto the bridge fields."""
        updates = dex_leg_updates({
            "status": "WAITING_FOR_SWAP_CONFIRMATIONS",
            "from_asset": "ETH",
            "from_amount": Decimal("2990000000000000000"),
            "from_account_id": "eth-account",
            "to_amount": Decimal("2995000000"),
        })

        assert updates == {
            "status": "WAITING_FOR_SWAP_CONFIRMATIONS",
            "bridge_asset": "ETH",
            "bridge_asset_amount": Decimal("2990000000000000000"),
            "to_account_id": "eth-account",
            "to_amount": Decimal("2995000000"),
        }

    def test_no_update(self):
        """Test an empty leg result stays empty."""
        assert atomic_leg_updates(None) is None
        assert dex_leg_updates(None) is None
        assert atomic_leg_updates({}) == {}
