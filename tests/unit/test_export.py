"""
Unit tests for the tabular view and exporter (wealth_pulse.frame / .export).

Tests DataFrame layout, CSV and Parquet export, directory creation,
error handling, and exact-decimal fidelity using pytest's tmp_path.
"""

from __future__ import annotations

import datetime
from decimal import Decimal

import pandas as pd
import pytest

from wealth_pulse.core import Amount, Price, Symbol, SymbolLocation
from wealth_pulse.exceptions import ExportError
from wealth_pulse.export import export_prices
from wealth_pulse.frame import PRICE_COLUMNS, prices_to_frame


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_prices() -> list[Price]:
    """Two prices: one symbol-left, one symbol-right with whitespace."""
    return [
        Price(
            date=datetime.date(2016, 7, 10),
            symbol=Symbol("MUTF25", quoted=True),
            amount=Amount(Decimal("5.82"), Symbol("$")),
        ),
        Price(
            date=datetime.date(2016, 7, 11),
            symbol=Symbol("CAD"),
            amount=Amount(
                Decimal("0.7664"),
                Symbol("USD"),
                symbol_location=SymbolLocation.RIGHT,
                whitespace=True,
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# prices_to_frame
# ---------------------------------------------------------------------------

class TestPricesToFrame:
    """Tests for prices_to_frame()."""

    def test_columns_and_order(self):
        df = prices_to_frame(_make_prices())
        assert list(df.columns) == PRICE_COLUMNS
        assert list(df["date"]) == ["2016-07-10", "2016-07-11"]

    def test_values(self):
        row = prices_to_frame(_make_prices()).iloc[1]
        assert row["symbol"] == "CAD"
        assert not row["symbol_quoted"]
        assert row["quantity"] == Decimal("0.7664")
        assert row["amount_symbol"] == "USD"
        assert row["symbol_location"] == "right"
        assert row["whitespace"]

    def test_quantities_stay_decimal(self):
        df = prices_to_frame(_make_prices())
        assert all(isinstance(q, Decimal) for q in df["quantity"])

    def test_empty(self):
        df = prices_to_frame([])
        assert len(df) == 0
        assert list(df.columns) == PRICE_COLUMNS
        assert df["whitespace"].dtype == bool


# ---------------------------------------------------------------------------
# export_prices
# ---------------------------------------------------------------------------

class TestExportCSV:
    """Tests for CSV export."""

    def test_basic_csv_export(self, tmp_path):
        path = export_prices(_make_prices(), tmp_path, output_format="csv")
        assert path.endswith("prices.csv")
        assert (tmp_path / "prices.csv").exists()

    def test_csv_round_trip(self, tmp_path):
        export_prices(_make_prices(), tmp_path, output_format="csv")
        loaded = pd.read_csv(tmp_path / "prices.csv", dtype={"quantity": str})
        assert list(loaded.columns) == PRICE_COLUMNS
        assert list(loaded["quantity"]) == ["5.82", "0.7664"]

    def test_csv_small_quantity_not_exponent(self, tmp_path):
        prices = [
            Price(
                date=datetime.date(2016, 7, 10),
                symbol=Symbol("SAT"),
                amount=Amount(Decimal("0.00000001"), Symbol("BTC")),
            )
        ]
        export_prices(prices, tmp_path, output_format="csv")
        loaded = pd.read_csv(tmp_path / "prices.csv", dtype={"quantity": str})
        assert loaded["quantity"].iloc[0] == "0.00000001"


class TestExportParquet:
    """Tests for Parquet export."""

    def test_basic_parquet_export(self, tmp_path):
        path = export_prices(_make_prices(), tmp_path)
        assert path.endswith("prices.parquet")
        assert (tmp_path / "prices.parquet").exists()

    def test_parquet_round_trip(self, tmp_path):
        export_prices(_make_prices(), tmp_path, output_format="parquet")
        loaded = pd.read_parquet(tmp_path / "prices.parquet")
        assert list(loaded.columns) == PRICE_COLUMNS
        assert len(loaded) == 2
        assert Decimal(str(loaded["quantity"].iloc[1])) == Decimal("0.7664")

    def test_custom_table_name(self, tmp_path):
        export_prices(_make_prices(), tmp_path, table_name="pricedb")
        assert (tmp_path / "pricedb.parquet").exists()


class TestExportEdgeCases:
    """Edge cases: directory creation, bad format."""

    def test_creates_output_dir(self, tmp_path):
        out = tmp_path / "deep" / "nested"
        export_prices(_make_prices(), out, output_format="csv")
        assert (out / "prices.csv").exists()

    def test_unsupported_format_raises(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_prices(_make_prices(), tmp_path, output_format="xlsx")  # type: ignore[arg-type]
