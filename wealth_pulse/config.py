"""
Configuration models and YAML I/O for wealth-pulse.

This module defines the Pydantic models that map 1:1 to a
``wealth_pulse.yaml`` file, plus helpers for loading and saving it.

Key models:
- WealthPulseConfig: Top-level config (source + output + log level).
- SourceConfig: Price database path and its text encoding.
- OutputConfig: Export directory, format and table name.

Key functions:
- load_config(path) -> WealthPulseConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

The parsing core never reads this config; only the CLI does.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from wealth_pulse.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Price database file information."""

    price_db_path: str = Field(..., description="Path to the .pricedb file")
    encoding: str = Field("utf-8-sig", description="Text encoding of the file")


class OutputConfig(BaseModel):
    """Export settings."""

    output_dir: str | None = Field(
        None, description="Directory for exported tables; no export if unset"
    )
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )
    table_name: str = Field("prices", description="File stem of the exported table")

    @field_validator("table_name")
    @classmethod
    def _check_table_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("table_name must not be empty")
        return value


class WealthPulseConfig(BaseModel):
    """Top-level configuration for the wealth-pulse command."""

    source: SourceConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def load_config(path: str | Path) -> WealthPulseConfig:
    """Load and validate a YAML config into a WealthPulseConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not valid YAML.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return WealthPulseConfig.model_validate(raw)


def save_config(config: WealthPulseConfig, path: str | Path) -> None:
    """Serialize a WealthPulseConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# wealth-pulse configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
