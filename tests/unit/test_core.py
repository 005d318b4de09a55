"""
Unit tests for the domain types (wealth_pulse.core).

Tests Symbol invariants, immutability, and the canonical text rendering
of symbols, amounts, prices and whole price databases.
"""

from __future__ import annotations

import dataclasses
import datetime
from decimal import Decimal

import pytest

from wealth_pulse.core import Amount, Price, Symbol, SymbolLocation, format_price_db


def _price(day: int = 10, qty: str = "5.82") -> Price:
    return Price(
        date=datetime.date(2016, 7, day),
        symbol=Symbol("MUTF25", quoted=True),
        amount=Amount(Decimal(qty), Symbol("$")),
    )


# ---------------------------------------------------------------------------
# Symbol
# ---------------------------------------------------------------------------

class TestSymbol:
    """Tests for Symbol construction and rendering."""

    def test_defaults_to_non_quoted(self):
        assert Symbol("AAPL").quoted is False

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            Symbol("")

    def test_empty_quoted_value_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            Symbol("", quoted=True)

    @pytest.mark.parametrize("value", ["A1", "-X", "A;B", "A B", 'A"B', "A\tB", "A\nB"])
    def test_non_quoted_excluded_characters(self, value):
        with pytest.raises(ValueError, match="non-quoted"):
            Symbol(value)

    def test_quoted_may_contain_spaces_and_digits(self):
        s = Symbol("Vanguard 500 - Admiral", quoted=True)
        assert s.value == "Vanguard 500 - Admiral"

    @pytest.mark.parametrize("value", ['A"B', "A\rB", "A\nB"])
    def test_quoted_excluded_characters(self, value):
        with pytest.raises(ValueError, match="quoted"):
            Symbol(value, quoted=True)

    def test_str_non_quoted(self):
        assert str(Symbol("$")) == "$"

    def test_str_quoted(self):
        assert str(Symbol("MUTF25", quoted=True)) == '"MUTF25"'

    def test_frozen(self):
        s = Symbol("AAPL")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.value = "MSFT"  # type: ignore[misc]

    def test_equality_includes_quoted_flag(self):
        assert Symbol("X") != Symbol("X", quoted=True)


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------

class TestAmount:
    """Tests for Amount rendering."""

    def test_left_no_whitespace(self):
        amt = Amount(Decimal("5.82"), Symbol("$"))
        assert str(amt) == "$5.82"

    def test_left_with_whitespace(self):
        amt = Amount(Decimal("5.82"), Symbol("$"), whitespace=True)
        assert str(amt) == "$ 5.82"

    def test_right_with_whitespace(self):
        amt = Amount(
            Decimal("5.82"),
            Symbol("MUTF25", quoted=True),
            symbol_location=SymbolLocation.RIGHT,
            whitespace=True,
        )
        assert str(amt) == '5.82 "MUTF25"'

    def test_right_no_whitespace(self):
        amt = Amount(Decimal("0.7664"), Symbol("USD"), symbol_location=SymbolLocation.RIGHT)
        assert str(amt) == "0.7664USD"

    def test_negative_quantity(self):
        assert str(Amount(Decimal("-45.22"), Symbol("$"))) == "$-45.22"

    def test_small_quantity_never_uses_exponent(self):
        """'E' is a valid symbol character, so exponent notation must not appear."""
        amt = Amount(Decimal("0.0000001"), Symbol("BTC"), symbol_location=SymbolLocation.RIGHT)
        assert str(amt) == "0.0000001BTC"

    def test_quantity_equality_ignores_trailing_zeros(self):
        assert Amount(Decimal("5.80"), Symbol("$")) == Amount(Decimal("5.8"), Symbol("$"))


# ---------------------------------------------------------------------------
# Price / format_price_db
# ---------------------------------------------------------------------------

class TestPrice:
    """Tests for Price rendering and format_price_db()."""

    def test_str(self):
        assert str(_price()) == 'P 2016-07-10 "MUTF25" $5.82'

    def test_date_is_zero_padded(self):
        p = dataclasses.replace(_price(), date=datetime.date(2016, 1, 2))
        assert str(p).startswith("P 2016-01-02 ")

    def test_format_price_db_joins_with_newline(self):
        text = format_price_db([_price(9, "5.66"), _price(10, "5.82")])
        assert text == 'P 2016-07-09 "MUTF25" $5.66\nP 2016-07-10 "MUTF25" $5.82'

    def test_format_empty(self):
        assert format_price_db([]) == ""
