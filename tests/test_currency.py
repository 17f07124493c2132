"""Tests for Rupiah parsing and formatting."""

from src.currency import format_amount, normalize_input, parse_amount

NBSP = "\u00a0"


class TestParseAmount:
    """Tests for parse_amount."""

    def test_plain_digits(self):
        assert parse_amount("2000000") == 2000000

    def test_formatted_text(self):
        """Test that symbol and grouping separators are stripped."""
        assert parse_amount(f"Rp{NBSP}1.350.000") == 1350000
        assert parse_amount("Rp 12,500") == 12500

    def test_negative(self):
        assert parse_amount(f"-Rp{NBSP}2.500") == -2500

    def test_empty(self):
        assert parse_amount("") == 0

    def test_no_digits(self):
        """Test that text without digits counts as zero."""
        for text in ["abc", "Rp", "   ", f"Rp{NBSP}", "..,,", "harga"]:
            assert parse_amount(text) == 0

    def test_unparseable_remainder(self):
        """Test that stray minus signs degrade to zero instead of raising."""
        assert parse_amount("-") == 0
        assert parse_amount("1-2") == 0
        assert parse_amount("--5") == 0

    def test_leading_zeros(self):
        assert parse_amount("007") == 7

    def test_decimal_point_is_not_a_decimal(self):
        """Test that dots are treated as grouping, not as a fraction."""
        assert parse_amount("1.5") == 15


class TestFormatAmount:
    """Tests for format_amount."""

    def test_zero(self):
        assert format_amount(0) == f"Rp{NBSP}0"

    def test_grouping(self):
        assert format_amount(999) == f"Rp{NBSP}999"
        assert format_amount(1000) == f"Rp{NBSP}1.000"
        assert format_amount(1350000) == f"Rp{NBSP}1.350.000"

    def test_negative(self):
        assert format_amount(-2500000) == f"-Rp{NBSP}2.500.000"

    def test_rounds_to_whole_rupiah(self):
        """Test rounding half away from zero."""
        assert format_amount(135000.4) == f"Rp{NBSP}135.000"
        assert format_amount(0.5) == f"Rp{NBSP}1"
        assert format_amount(2.5) == f"Rp{NBSP}3"
        assert format_amount(-6500.5) == f"-Rp{NBSP}6.501"


class TestRoundTrip:
    """Tests for parse_amount(format_amount(x)) == x."""

    def test_non_negative_integers(self):
        for amount in [0, 1, 9, 10, 999, 1000, 123456, 1000000, 987654321012]:
            assert parse_amount(format_amount(amount)) == amount

    def test_negative_integers(self):
        for amount in [-1, -1000, -65000]:
            assert parse_amount(format_amount(amount)) == amount

    def test_beyond_28_digits(self):
        """Test amounts longer than the default decimal precision."""
        for amount in [10**28 - 1, 10**28, 10**29 + 7, 10**40, 3 * 10**60]:
            assert parse_amount(format_amount(amount)) == amount

        assert parse_amount(format_amount(-(10**30))) == -(10**30)


class TestNormalizeInput:
    """Tests for keystroke normalization."""

    def test_digits_become_currency(self):
        assert normalize_input("2000000") == f"Rp{NBSP}2.000.000"

    def test_typing_into_formatted_text(self):
        """Test that a digit appended to formatted text regroups."""
        assert normalize_input(f"Rp{NBSP}1.0005") == f"Rp{NBSP}10.005"

    def test_letters_discarded(self):
        assert normalize_input("12a3") == f"Rp{NBSP}123"

    def test_no_digits_becomes_zero(self):
        assert normalize_input("abc") == f"Rp{NBSP}0"
        assert normalize_input("") == f"Rp{NBSP}0"

    def test_long_input(self):
        """Test that a 29-digit price is accepted and regrouped."""
        assert normalize_input("1" * 29) == f"Rp{NBSP}11.111.111.111.111.111.111.111.111.111"


class TestFormatLargeFloats:
    """Tests for formatting large computed figures."""

    def test_large_float(self):
        """Test that a float beyond 28 digits formats without error."""
        assert format_amount(1.5e30) == f"Rp{NBSP}1.500.{'000.' * 8}000"

    def test_large_float_digits(self):
        assert parse_amount(format_amount(3.5e29)) == 35 * 10**28
