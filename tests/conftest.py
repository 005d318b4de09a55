"""
Shared test fixtures and path constants for wealth-pulse tests.

Input file paths are defined here as module-level constants. Tests that
need a file of their own write it to ``tmp_path``.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent / "data"

SAMPLE_PRICEDB = DATA_DIR / "sample.pricedb"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def sample_pricedb() -> Path:
    """Path to the bundled five-record sample price database."""
    return SAMPLE_PRICEDB


@pytest.fixture()
def write_pricedb(tmp_path):
    """Factory: write text to a .pricedb file under tmp_path, return its path."""
    def _write(text: str, name: str = "test.pricedb", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (loads files / runs the CLI)",
    )
