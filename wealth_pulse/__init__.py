"""
wealth-pulse: parser for ledger price databases.

Public API surface:

- ``parse_price_db(text)`` -- parse price database text into a list of
  ``Price`` records, in file order.

- ``load_price_db(path)`` -- read a ``.pricedb`` file and parse it;
  parse errors carry the file name.

- ``format_price_db(prices)`` -- render prices back to canonical text
  that parses to equal values.

- ``prices_to_frame(prices)`` / ``export_prices(prices, output_dir)`` --
  tabular view of the parsed prices (pandas) and CSV/Parquet export.

Example::

    prices = wealth_pulse.parse_price_db('P 2016-07-10 "MUTF25" $5.82')
    prices[0].amount.quantity   # Decimal('5.82')
"""

from __future__ import annotations

from wealth_pulse.core import Amount, Price, Symbol, SymbolLocation, format_price_db
from wealth_pulse.exceptions import (
    ParseError,
    SemanticValidationError,
    StructuralParseError,
    WealthPulseError,
)
from wealth_pulse.export import export_prices
from wealth_pulse.frame import prices_to_frame
from wealth_pulse.loader import load_price_db
from wealth_pulse.parsing import parse_price_db

__all__ = [
    "Amount",
    "ParseError",
    "Price",
    "SemanticValidationError",
    "StructuralParseError",
    "Symbol",
    "SymbolLocation",
    "WealthPulseError",
    "export_prices",
    "format_price_db",
    "load_price_db",
    "parse_price_db",
    "prices_to_frame",
]
