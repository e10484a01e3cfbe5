"""Tests for swap execution."""

import pytest

from cpamm.errors import InvalidAmount, InvalidReserves, SlippageExceeded, TransferFailed
from cpamm.pricing import pricing_engine
from tests.helpers import (
    ALICE,
    BASE,
    BOB,
    CAROL,
    DEFAULT_FUNDING,
    POOL_ACCOUNT,
    SECOND,
    RefusingLedger,
    fund,
    make_pool,
)


class TestSwapBaseForSecond:
    """Selling base for the second asset."""

    def test_reference_scenario(self, seeded_pool, ledger):
        """Pool (2000, 1000), 100 base in yields 47 second out."""
        second_out = seeded_pool.swap_base_for_second(BOB, 100, 47)

        assert second_out == 47
        assert seeded_pool.get_reserves() == (2100, 953)
        assert ledger.balance_of(SECOND, BOB) == DEFAULT_FUNDING + 47
        assert ledger.balance_of(BASE, BOB) == DEFAULT_FUNDING - 100

    def test_prices_against_reserve_before_this_swap(self, seeded_pool):
        """The attached base is excluded from the input reserve."""
        assert seeded_pool.swap_base_for_second(BOB, 100, 0) == pricing_engine.quote_output(
            100, 2000, 1000
        )

    def test_slippage_exceeded(self, seeded_pool, ledger):
        with pytest.raises(SlippageExceeded):
            seeded_pool.swap_base_for_second(BOB, 100, 48)

        assert seeded_pool.get_reserves() == (2000, 1000)
        assert ledger.balance_of(BASE, BOB) == DEFAULT_FUNDING
        assert ledger.balance_of(SECOND, BOB) == DEFAULT_FUNDING

    def test_shares_unchanged(self, seeded_pool):
        seeded_pool.swap_base_for_second(BOB, 100, 0)
        assert seeded_pool.total_shares() == 2000

    def test_zero_input_rejected(self, seeded_pool):
        with pytest.raises(InvalidAmount):
            seeded_pool.swap_base_for_second(BOB, 0, 0)

    def test_empty_pool_rejected(self, pool, ledger):
        with pytest.raises(InvalidReserves):
            pool.swap_base_for_second(BOB, 100, 0)
        assert ledger.balance_of(BASE, BOB) == DEFAULT_FUNDING

    def test_unfunded_caller_rejected(self, seeded_pool):
        with pytest.raises(TransferFailed):
            seeded_pool.swap_base_for_second(CAROL, 100, 0)
        assert seeded_pool.get_reserves() == (2000, 1000)


class TestSwapSecondForBase:
    """Selling the second asset for base."""

    def test_basic_swap(self, seeded_pool, ledger):
        expected = pricing_engine.quote_output(100, 1000, 2000)

        base_out = seeded_pool.swap_second_for_base(BOB, 100, expected)

        assert base_out == expected == 180
        assert seeded_pool.get_reserves() == (2000 - 180, 1100)
        assert ledger.balance_of(BASE, BOB) == DEFAULT_FUNDING + 180
        assert ledger.balance_of(SECOND, BOB) == DEFAULT_FUNDING - 100

    def test_consumes_allowance(self, seeded_pool, ledger):
        before = ledger.allowance(SECOND, BOB, POOL_ACCOUNT)
        seeded_pool.swap_second_for_base(BOB, 100, 0)
        assert ledger.allowance(SECOND, BOB, POOL_ACCOUNT) == before - 100

    def test_slippage_exceeded(self, seeded_pool, ledger):
        with pytest.raises(SlippageExceeded):
            seeded_pool.swap_second_for_base(BOB, 100, 181)

        assert seeded_pool.get_reserves() == (2000, 1000)
        assert ledger.balance_of(SECOND, BOB) == DEFAULT_FUNDING

    def test_failed_pull_pays_no_base(self, seeded_pool, ledger):
        fund(ledger, CAROL, approve=False)

        with pytest.raises(TransferFailed):
            seeded_pool.swap_second_for_base(CAROL, 100, 0)

        assert seeded_pool.get_reserves() == (2000, 1000)
        assert ledger.balance_of(BASE, CAROL) == DEFAULT_FUNDING

    def test_zero_input_rejected(self, seeded_pool):
        with pytest.raises(InvalidAmount):
            seeded_pool.swap_second_for_base(BOB, 0, 0)

    def test_empty_pool_rejected(self, pool):
        with pytest.raises(InvalidReserves):
            pool.swap_second_for_base(BOB, 100, 0)


class TestFeeAccrual:
    """Fees stay in the pool and accrue to share holders."""

    def test_round_trip_swap_grows_pool(self, seeded_pool):
        k_before = 2000 * 1000
        second_out = seeded_pool.swap_base_for_second(BOB, 100, 0)
        seeded_pool.swap_second_for_base(BOB, second_out, 0)

        base_reserve, second_reserve = seeded_pool.get_reserves()
        assert base_reserve * second_reserve > k_before
        assert second_reserve == 1000

    def test_provider_withdraws_fees(self, seeded_pool, ledger):
        for _ in range(5):
            out = seeded_pool.swap_base_for_second(BOB, 200, 0)
            seeded_pool.swap_second_for_base(BOB, out, 0)

        base_out, second_out = seeded_pool.remove_liquidity(ALICE, 2000)
        assert second_out == 1000
        assert base_out > 2000


class TestSwapRefusedPayout:
    """A refused base payout hands the pulled second asset back."""

    def test_pulled_input_returned(self):
        ledger = RefusingLedger()
        pool, _, _ = make_pool(2000, 1000, ledger=ledger)
        fund(ledger, BOB)
        ledger.refused.add(BASE)

        with pytest.raises(TransferFailed):
            pool.swap_second_for_base(BOB, 100, 0)

        assert pool.get_reserves() == (2000, 1000)
        assert ledger.balance_of(SECOND, BOB) == DEFAULT_FUNDING
        assert ledger.balance_of(BASE, BOB) == DEFAULT_FUNDING
