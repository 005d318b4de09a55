"""
Command-line interface for wealth-pulse.

Usage:
    wealth-pulse ledger/.pricedb
    wealth-pulse ledger/.pricedb --export-dir outputs --format csv
    wealth-pulse --config wealth_pulse.yaml -v

Loads the price database, prints how many prices were loaded and, when an
export directory is given (flag or config), writes the price table there.
Command-line flags take precedence over the config file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wealth_pulse.config import OutputConfig, SourceConfig, WealthPulseConfig, load_config
from wealth_pulse.exceptions import WealthPulseError
from wealth_pulse.export import export_prices
from wealth_pulse.loader import load_price_db


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="wealth-pulse", description="Load a ledger price database"
    )
    parser.add_argument("price_db", nargs="?", help="Path to the .pricedb file")
    parser.add_argument("--config", type=str, help="YAML config file")
    parser.add_argument("--export-dir", type=str, help="Write the price table here")
    parser.add_argument("--format", choices=["csv", "parquet"], help="Export format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> WealthPulseConfig:
    """Merge the optional config file with CLI values."""
    if args.config:
        config = load_config(args.config)
    elif args.price_db:
        config = WealthPulseConfig(source=SourceConfig(price_db_path=args.price_db))
    else:
        raise ValueError("Give a price database path or --config")

    source = config.source
    if args.price_db:
        source = source.model_copy(update={"price_db_path": args.price_db})

    output_overrides: dict[str, object] = {}
    if args.export_dir:
        output_overrides["output_dir"] = args.export_dir
    if args.format:
        output_overrides["output_format"] = args.format
    output: OutputConfig = config.output.model_copy(update=output_overrides)

    log_level = "DEBUG" if args.verbose else config.log_level
    return config.model_copy(
        update={"source": source, "output": output, "log_level": log_level}
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.config and not args.price_db:
        parser.error("Give a price database path or --config")

    try:
        config = resolve_config(args)
    except (ValueError, FileNotFoundError, WealthPulseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        prices = load_price_db(config.source.price_db_path, encoding=config.source.encoding)
        print(f"Loaded {len(prices)} prices")
        if config.output.output_dir:
            path = export_prices(
                prices,
                config.output.output_dir,
                output_format=config.output.output_format,
                table_name=config.output.table_name,
            )
            print(f"Wrote {path}")
    except (FileNotFoundError, UnicodeDecodeError, WealthPulseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
