"""
File loader for wealth-pulse price databases.

Reads a ``.pricedb`` file into memory in one go and hands the full text
to ``parse_price_db()``. Filesystem and decoding errors propagate
unchanged; parse errors are re-raised tagged with the file name so the
message reads ``path:line:column: ...``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from wealth_pulse.core import Price
from wealth_pulse.exceptions import ParseError
from wealth_pulse.parsing import parse_price_db

logger = logging.getLogger(__name__)


def read_text(path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read a whole price database file.

    The default ``utf-8-sig`` encoding drops a leading BOM. Line endings
    are kept as-is (``\\r\\n`` is handled by the grammar).

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnicodeDecodeError: If the file is not valid in *encoding*.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Price database not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.info("Read %s (%d characters)", path, len(text))
    return text


def load_price_db(path: str | Path, encoding: str = "utf-8-sig") -> list[Price]:
    """Load and parse a price database file.

    Args:
        path: Path to the ``.pricedb`` file.
        encoding: Text encoding of the file.

    Returns:
        The parsed prices, in file order.

    Raises:
        FileNotFoundError: If *path* does not exist.
        StructuralParseError: If the file does not match the grammar.
        SemanticValidationError: If a date or quantity is invalid.
    """
    text = read_text(path, encoding=encoding)
    try:
        prices = parse_price_db(text)
    except ParseError as exc:
        raise exc.with_source(str(path)) from exc
    logger.info("Loaded %d prices from %s", len(prices), path)
    return prices
