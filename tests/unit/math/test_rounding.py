"""Tests for the rounding engine and power-of-ten cache."""

import pytest

from precise_money.constants import POW10_CACHE_SIZE
from precise_money.errors import DivisionByZero, InvalidDecimals
from precise_money.math import Rounding, div_round, pow10, require_decimals, round_adjust
from precise_money.math.rounding import trunc_divmod


class TestPow10:
    """Tests for pow10."""

    def test_cached_values(self):
        """Small exponents come from the table."""
        assert pow10(0) == 1
        assert pow10(6) == 1_000_000
        assert pow10(POW10_CACHE_SIZE - 1) == 10 ** (POW10_CACHE_SIZE - 1)

    def test_beyond_cache(self):
        """Large exponents are computed directly."""
        assert pow10(POW10_CACHE_SIZE) == 10**POW10_CACHE_SIZE
        assert pow10(77) == 10**77

    def test_negative_raises(self):
        with pytest.raises(InvalidDecimals):
            pow10(-1)

    def test_non_integer_raises(self):
        with pytest.raises(InvalidDecimals):
            pow10(1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidDecimals):
            pow10(True)


class TestRequireDecimals:
    """Tests for decimals validation."""

    def test_valid(self):
        assert require_decimals(0) == 0
        assert require_decimals(18) == 18

    def test_error_names_argument(self):
        """Error message names the offending argument."""
        with pytest.raises(InvalidDecimals, match="from_decimals"):
            require_decimals(-2, "from_decimals")

    def test_rejects_bool_and_strings(self):
        with pytest.raises(InvalidDecimals):
            require_decimals(False)
        with pytest.raises(InvalidDecimals):
            require_decimals("6")


class TestTruncDivmod:
    """Tests for truncating division."""

    def test_truncates_toward_zero(self):
        assert trunc_divmod(7, 2) == (3, 1)
        assert trunc_divmod(-7, 2) == (-3, -1)
        assert trunc_divmod(7, -2) == (-3, 1)
        assert trunc_divmod(-7, -2) == (3, -1)

    def test_zero_denominator(self):
        with pytest.raises(DivisionByZero):
            trunc_divmod(1, 0)


class TestDivRound:
    """Tests for div_round under each policy."""

    def test_exact_division_ignores_mode(self):
        """No remainder means no adjustment in any mode."""
        for mode in Rounding:
            assert div_round(10, 5, mode) == 2
            assert div_round(-10, 5, mode) == -2

    def test_floor(self):
        assert div_round(7, 2, Rounding.FLOOR) == 3
        assert div_round(-7, 2, Rounding.FLOOR) == -4
        assert div_round(7, -2, Rounding.FLOOR) == -4
        assert div_round(-7, -2, Rounding.FLOOR) == 3

    def test_ceil(self):
        assert div_round(7, 2, Rounding.CEIL) == 4
        assert div_round(-7, 2, Rounding.CEIL) == -3
        assert div_round(1, 3, Rounding.CEIL) == 1

    def test_round_half_away_from_zero(self):
        """ROUND breaks ties away from zero."""
        assert div_round(5, 2, Rounding.ROUND) == 3
        assert div_round(-5, 2, Rounding.ROUND) == -3
        assert div_round(4, 3, Rounding.ROUND) == 1
        assert div_round(5, 3, Rounding.ROUND) == 2

    def test_bankers_half_to_even(self):
        """BANKERS breaks ties toward the even neighbour."""
        assert div_round(5, 2, Rounding.BANKERS) == 2
        assert div_round(7, 2, Rounding.BANKERS) == 4
        assert div_round(-5, 2, Rounding.BANKERS) == -2
        assert div_round(-7, 2, Rounding.BANKERS) == -4

    def test_bankers_non_ties(self):
        """Away from ties BANKERS behaves like ROUND."""
        assert div_round(5, 3, Rounding.BANKERS) == 2
        assert div_round(4, 3, Rounding.BANKERS) == 1
        assert div_round(-5, 3, Rounding.BANKERS) == -2

    def test_accepts_mode_strings(self):
        """Modes may be passed by value."""
        assert div_round(5, 2, "bankers") == 2  # type: ignore[arg-type]

    def test_zero_denominator(self):
        with pytest.raises(DivisionByZero):
            div_round(5, 0, Rounding.ROUND)

    def test_large_values(self):
        """Arbitrary-precision operands round exactly."""
        big = 10**60
        assert div_round(big * 3 + 1, 2, Rounding.ROUND) == (big * 3) // 2 + 1
        assert div_round(big * 2 + 1, 2, Rounding.BANKERS) == big


class TestRoundAdjust:
    """Tests for round_adjust."""

    def test_floor_never_adjusts(self):
        assert round_adjust(1234, 1, Rounding.FLOOR) == 1234
        assert round_adjust(1234, -1, Rounding.FLOOR) == 1234

    def test_ceil_adjusts_positive_only(self):
        assert round_adjust(1234, 1, Rounding.CEIL) == 1235
        assert round_adjust(1234, -1, Rounding.CEIL) == 1234

    def test_round_adds_sign(self):
        assert round_adjust(1234, 1, Rounding.ROUND) == 1235
        assert round_adjust(1234, -1, Rounding.ROUND) == 1233

    def test_bankers_keeps_even(self):
        assert round_adjust(1234, 1, Rounding.BANKERS) == 1234
        assert round_adjust(1233, 1, Rounding.BANKERS) == 1234
