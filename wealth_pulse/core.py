"""
Domain types for wealth-pulse price databases.

All types are frozen dataclasses: they are built once by the grammar
(or by hand in tests) and never mutated afterwards.

``str()`` on each type renders the canonical ledger text for it, so a
parsed price can be written back out and re-parsed to an equal value.
Only the *presence* of whitespace inside an amount is recorded, so
rendering always uses a single space where the source had any.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

# Characters a bare (non-quoted) symbol may not contain
NON_QUOTED_EXCLUDED = frozenset('-0123456789; "\t\r\n')

# Characters a quoted symbol body may not contain
QUOTED_EXCLUDED = frozenset('"\r\n')


class SymbolLocation(Enum):
    """Which side of the quantity the symbol was written on."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Symbol:
    """A commodity or currency identifier, e.g. ``$`` or ``"MUTF25"``."""

    value: str
    quoted: bool = False

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Symbol value cannot be empty")
        excluded = QUOTED_EXCLUDED if self.quoted else NON_QUOTED_EXCLUDED
        bad = sorted(set(self.value) & excluded)
        if bad:
            kind = "quoted" if self.quoted else "non-quoted"
            raise ValueError(
                f"Invalid character(s) {bad!r} in {kind} symbol {self.value!r}"
            )

    def __str__(self) -> str:
        if self.quoted:
            return f'"{self.value}"'
        return self.value


@dataclass(frozen=True)
class Amount:
    """A quantity together with its symbol and how they were written.

    Attributes:
        quantity: Exact decimal value (never a float).
        symbol: The commodity the quantity is denominated in.
        symbol_location: ``LEFT`` for ``$5.82``, ``RIGHT`` for ``5.82 USD``.
        whitespace: Whether any space/tab separated symbol and quantity.
    """

    quantity: Decimal
    symbol: Symbol
    symbol_location: SymbolLocation = SymbolLocation.LEFT
    whitespace: bool = False

    def __str__(self) -> str:
        sep = " " if self.whitespace else ""
        if self.symbol_location is SymbolLocation.LEFT:
            return f"{self.symbol}{sep}{self.quantity:f}"
        return f"{self.quantity:f}{sep}{self.symbol}"


@dataclass(frozen=True)
class Price:
    """One price observation: on ``date`` one ``symbol`` was worth ``amount``."""

    date: datetime.date
    symbol: Symbol
    amount: Amount

    def __str__(self) -> str:
        return f"P {self.date.isoformat()} {self.symbol} {self.amount}"


def format_price_db(prices: list[Price]) -> str:
    """Render prices as price database text, one record per line.

    No trailing newline is written; the result parses back to *prices*.
    """
    return "\n".join(str(p) for p in prices)
