"""
Exporter for wealth-pulse.

Writes the price table built by ``prices_to_frame()`` to the output
directory as ``{table_name}.{format}``.

- Parquet (default) goes through pyarrow, which stores ``Decimal``
  quantities as an exact ``decimal128`` column.
- CSV renders quantities as fixed-point decimal strings, so no value is
  ever routed through a float.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from wealth_pulse.core import Price
from wealth_pulse.exceptions import ExportError
from wealth_pulse.frame import prices_to_frame

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df = df.assign(quantity=[format(q, "f") for q in df["quantity"]])
            df.to_csv(path, index=False, encoding="utf-8")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_prices(
    prices: list[Price],
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
    table_name: str = "prices",
) -> str:
    """Write prices to ``{output_dir}/{table_name}.{output_format}``.

    The output directory is created recursively if it does not exist.

    Args:
        prices: Parsed prices, written in the given order.
        output_dir: Directory to write into (created if needed).
        output_format: "csv" or "parquet".
        table_name: File stem of the output table.

    Returns:
        The path of the written file, as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    df = prices_to_frame(prices)
    file_path = out / f"{table_name}.{output_format}"
    _write_dataframe(df, file_path, output_format)
    logger.info(
        "Exported table '%s' -> %s (%d rows, %d cols)",
        table_name,
        file_path.name,
        len(df),
        len(df.columns),
    )
    return str(file_path)
