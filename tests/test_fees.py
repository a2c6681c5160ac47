"""Tests for boost fee estimation."""

from decimal import Decimal

import pytest

from bridgeswap.routing.fees import sum_fee_vectors

FEE_PRICES = [Decimal("10"), Decimal("20")]


class TestSumFeeVectors:
    """Tests for key-wise fee vector addition."""

    def test_matching_keys(self):
        """Test values are added per key."""
        total = sum_fee_vectors(
            {"slow": Decimal("1"), "fast": Decimal("2")},
            {"slow": Decimal("0.5"), "fast": Decimal("1.5")},
        )

        assert total == {"slow": Decimal("1.5"), "fast": Decimal("3.5")}

    def test_missing_keys_count_as_zero(self):
        """Test keys present on one side only are kept."""
        total = sum_fee_vectors(
            {"slow": Decimal("1"), "average": Decimal("2")},
            {"slow": Decimal("1"), "fast": Decimal("4")},
        )

        assert total == {
            "slow": Decimal("2"),
            "average": Decimal("2"),
            "fast": Decimal("4"),
        }


class TestEstimateFees:
    """Tests for BoostSwapProvider.estimate_fees."""

    @pytest.mark.asyncio
    async def test_claim_of_token_sums_both_legs(self, provider, atomic_leg, dex_leg, boost_quote):
        """Test claiming into a token adds the DEX swap fees."""
        atomic_leg.estimate_fees.return_value = {Decimal("10"): Decimal("0.002"), Decimal("20"): Decimal("0.004")}
        dex_leg.estimate_fees.return_value = {Decimal("10"): Decimal("0.001"), Decimal("20"): Decimal("0.003")}

        fees = await provider.estimate_fees(
            "mainnet", "wallet-1", "DAI", "SWAP_CLAIM", boost_quote, FEE_PRICES
        )

        assert fees == {Decimal("10"): Decimal("0.003"), Decimal("20"): Decimal("0.007")}

    @pytest.mark.asyncio
    async def test_claim_remaps_quote_per_leg(self, provider, atomic_leg, dex_leg, boost_quote):
        """Test each leg is asked about its own half of the swap."""
        atomic_leg.estimate_fees.return_value = {Decimal("10"): Decimal("1")}
        dex_leg.estimate_fees.return_value = {Decimal("10"): Decimal("1")}

        await provider.estimate_fees("mainnet", "wallet-1", "DAI", "SWAP_CLAIM", boost_quote, FEE_PRICES, True)

        atomic_args = atomic_leg.estimate_fees.await_args.args
        assert atomic_args[3] == "SWAP_CLAIM"
        atomic_quote = atomic_args[4]
        assert atomic_quote.from_asset == "BTC"
        assert atomic_quote.to_asset == "ETH"
        assert atomic_quote.to_amount == boost_quote.bridge_asset_amount
        assert atomic_args[6] is True

        dex_args = dex_leg.estimate_fees.await_args.args
        assert dex_args[3] == "SWAP"
        dex_quote = dex_args[4]
        assert dex_quote.from_asset == "ETH"
        assert dex_quote.to_asset == "DAI"
        assert dex_quote.from_amount == boost_quote.bridge_asset_amount
        assert dex_quote.from_account_id == "eth-account"
        assert dex_quote.slippage_percentage == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tx_type", ["SWAP_INITIATION", "APPROVE", "SWAP"])
    async def test_other_tx_types_return_leg_one_fees(self, provider, atomic_leg, dex_leg, boost_quote, tx_type):
        """Test only leg 1 is estimated outside the token claim."""
        leg_one_fees = {Decimal("10"): Decimal("0.0001")}
        atomic_leg.estimate_fees.return_value = leg_one_fees

        fees = await provider.estimate_fees("mainnet", "wallet-1", "DAI", tx_type, boost_quote, FEE_PRICES)

        assert fees is leg_one_fees
        dex_leg.estimate_fees.assert_not_called()

    @pytest.mark.asyncio
    async def test_claim_of_native_asset_skips_dex(self, provider, atomic_leg, dex_leg, boost_quote):
        """Test the claim fee shown for a native asset is leg 1 only."""
        leg_one_fees = {Decimal("10"): Decimal("0.0001")}
        atomic_leg.estimate_fees.return_value = leg_one_fees

        fees = await provider.estimate_fees("mainnet", "wallet-1", "ETH", "SWAP_CLAIM", boost_quote, FEE_PRICES)

        assert fees is leg_one_fees
        dex_leg.estimate_fees.assert_not_called()

    @pytest.mark.asyncio
    async def test_mismatched_keys_zero_filled(self, provider, atomic_leg, dex_leg, boost_quote):
        """Test fee levels known to only one leg are not dropped."""
        atomic_leg.estimate_fees.return_value = {Decimal("10"): Decimal("1")}
        dex_leg.estimate_fees.return_value = {Decimal("10"): Decimal("2"), Decimal("20"): Decimal("3")}

        fees = await provider.estimate_fees("mainnet", "wallet-1", "DAI", "SWAP_CLAIM", boost_quote, FEE_PRICES)

        assert fees == {Decimal("10"): Decimal("3"), Decimal("20"): Decimal("3")}
