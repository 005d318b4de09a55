"""
Tabular view of parsed prices.

``prices_to_frame()`` flattens ``Price`` records into a pandas DataFrame,
one row per price in file order. Dates are ISO ``YYYY-MM-DD`` strings so
lexicographic comparison matches date order; quantities stay as exact
``Decimal`` objects.
"""

from __future__ import annotations

import pandas as pd

from wealth_pulse.core import Price

PRICE_COLUMNS = [
    "date",
    "symbol",
    "symbol_quoted",
    "quantity",
    "amount_symbol",
    "amount_symbol_quoted",
    "symbol_location",
    "whitespace",
]


def prices_to_frame(prices: list[Price]) -> pd.DataFrame:
    """Build a DataFrame with one row per price and ``PRICE_COLUMNS`` columns."""
    rows = [
        {
            "date": p.date.isoformat(),
            "symbol": p.symbol.value,
            "symbol_quoted": p.symbol.quoted,
            "quantity": p.amount.quantity,
            "amount_symbol": p.amount.symbol.value,
            "amount_symbol_quoted": p.amount.symbol.quoted,
            "symbol_location": p.amount.symbol_location.value,
            "whitespace": p.amount.whitespace,
        }
        for p in prices
    ]
    df = pd.DataFrame(rows, columns=PRICE_COLUMNS)
    # An empty frame would otherwise get float64 flag columns
    return df.astype({"symbol_quoted": bool, "amount_symbol_quoted": bool, "whitespace": bool})
