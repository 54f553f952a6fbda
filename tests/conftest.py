"""Pytest configuration and shared fixtures for the tradebook test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

JOURNAL_CSV = """Trade Journal,,,,,,
Date,Ticker,Entry,Exit,PnL,% Return,Notes
5/1/24,aapl,100,110,"1,000.50",5%,breakout
2024-01-20,MSFT,50,45,-200,-2.5%,
2024-02-03,AAPL,,,,abc,
,,,,,,
2024-02-10,tsla,10,12,300,,gap
"""


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling network tests."""

    parser.addoption(
        "--tradebook-run-network",
        action="store_true",
        default=False,
        help="Run tradebook tests that reach a real spreadsheet export.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "network: marks tradebook tests requiring outbound HTTP access",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip network tests unless explicitly requested."""

    if config.getoption("--tradebook-run-network"):
        return

    skip_network = pytest.mark.skip(reason="network tests require --tradebook-run-network")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def journal_csv() -> str:
    """A small trade journal with a title row, one blank row and flagged rows."""

    return JOURNAL_CSV


@pytest.fixture
def journal_file(tmp_path: Path, journal_csv: str) -> Path:
    path = tmp_path / "DayTrade Strategy.csv"
    path.write_text(journal_csv, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep TRADEBOOK_* variables and a stray ``.env`` out of every test."""

    for name in ("SHEET_ID", "SHEET_GID", "LOCAL_CANDIDATES", "REQUEST_TIMEOUT", "LOG_LEVEL", "SHEET_URL_TEMPLATE"):
        monkeypatch.delenv(f"TRADEBOOK_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks configured by a test so later log calls cannot reach closed streams."""

    yield
    logger.remove()
