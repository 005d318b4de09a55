"""
Price database grammar.

Each rule is a module-level ``Parser`` built from the combinators in
``wealth_pulse.parsing.base`` and ``wealth_pulse.parsing.text``::

    price_db  := price (newline price)* trailing-whitespace EOF
    price     := 'P' ws date ws symbol ws amount
    date      := year '-' month '-' day
    symbol    := quoted_symbol | non_quoted_symbol
    amount    := symbol ws? quantity | quantity ws? symbol
    quantity  := '-'? digit (digit | ',' | '.')*

where ``ws`` is one or more spaces/tabs and ``ws?`` zero or more.

Alternatives are tried in the order written. A quantity always starts
with a digit or ``-`` and a symbol never does, so the two amount forms
cannot both match the same input.
"""

from __future__ import annotations

import datetime
from decimal import Decimal

from wealth_pulse.core import (
    NON_QUOTED_EXCLUDED,
    QUOTED_EXCLUDED,
    Amount,
    Price,
    Symbol,
    SymbolLocation,
)
from wealth_pulse.parsing.base import (
    char,
    either,
    eof,
    ignore,
    many,
    many1,
    option,
    sep_by,
    sequence,
)
from wealth_pulse.parsing.text import (
    DIGITS,
    digit,
    fixed_integer,
    newline,
    none_of,
    one_of,
    space,
    tab,
)


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------

_blank = either(space, tab).desc("whitespace")

# One or more spaces/tabs; the value is always True.
mandatory_whitespace = many1(_blank).map(lambda _: True).desc("whitespace")

# Zero or more spaces/tabs; the value says whether any were found.
optional_whitespace = many(_blank).map(lambda found: len(found) > 0)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

year = fixed_integer(4)
month = fixed_integer(2)
day = fixed_integer(2)

# YYYY-MM-DD, checked against the calendar after matching
date = (
    sequence(year, ignore(char("-")), month, ignore(char("-")), day)
    .validate(lambda ymd: datetime.date(*ymd), "date")
    .desc("date")
)


# ---------------------------------------------------------------------------
# Symbols
# ---------------------------------------------------------------------------

quoted_symbol = sequence(
    ignore(char('"')),
    many1(none_of("".join(QUOTED_EXCLUDED), "quoted symbol character")),
    ignore(char('"')),
).map(lambda parts: Symbol("".join(parts[0]), quoted=True))

non_quoted_symbol = many1(
    none_of("".join(NON_QUOTED_EXCLUDED), "symbol")
).map(lambda chars: Symbol("".join(chars)))

symbol = either(quoted_symbol, non_quoted_symbol)


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------

def _to_decimal(parts: list) -> Decimal:
    sign, first, rest = parts
    return Decimal((sign + first + "".join(rest)).replace(",", ""))


# Grouping commas are stripped before the value is built; a second
# decimal point only fails at that stage.
quantity = sequence(
    option(char("-"), ""),
    digit,
    many(one_of(DIGITS + ",.", "digit, ',' or '.'")),
).validate(_to_decimal, "quantity")


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

amount_symbol_then_quantity = sequence(symbol, optional_whitespace, quantity).map(
    lambda v: Amount(
        quantity=v[2],
        symbol=v[0],
        symbol_location=SymbolLocation.LEFT,
        whitespace=v[1],
    )
)

amount_quantity_then_symbol = sequence(quantity, optional_whitespace, symbol).map(
    lambda v: Amount(
        quantity=v[0],
        symbol=v[2],
        symbol_location=SymbolLocation.RIGHT,
        whitespace=v[1],
    )
)

amount = either(amount_symbol_then_quantity, amount_quantity_then_symbol)


# ---------------------------------------------------------------------------
# Price records
# ---------------------------------------------------------------------------

price = sequence(
    ignore(char("P")),
    ignore(mandatory_whitespace),
    date,
    ignore(mandatory_whitespace),
    symbol,
    ignore(mandatory_whitespace),
    amount,
).map(lambda v: Price(date=v[0], symbol=v[1], amount=v[2]))

# Records separated by newlines. Whitespace after the last record is
# allowed, so a trailing newline and whitespace-only input are accepted.
price_db = sequence(
    sep_by(price, newline),
    ignore(many(one_of(" \t\r\n", "whitespace"))),
    ignore(eof),
).map(lambda v: v[0])
