"""
Parsing sub-package for wealth-pulse.

- base.py implements the combinator engine (Parser, Success, Failure and
  the sequence / either / many / sep_by combinators).
- text.py provides character-level primitives (whitespace, digits,
  newlines, fixed-width integers).
- grammar.py composes those into the price database grammar.

``parse_price_db()`` is the entry point for turning price database text
into ``Price`` records.
"""

from __future__ import annotations

import logging

from wealth_pulse.core import Price
from wealth_pulse.parsing.grammar import price_db

__all__ = ["parse_price_db"]

logger = logging.getLogger(__name__)


def parse_price_db(text: str) -> list[Price]:
    """Parse price database text into a list of prices in file order.

    Empty or whitespace-only text yields an empty list.

    Raises:
        StructuralParseError: If the text does not match the grammar.
        SemanticValidationError: If a date or quantity is invalid.
    """
    prices = price_db.parse(text)
    logger.debug("Parsed %d price records from %d characters", len(prices), len(text))
    return prices
