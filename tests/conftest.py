"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import os
from pathlib import Path

import pytest

from land_router.config import CountryDataConfig, reset_config
from land_router.container import reset_container
from land_router.domain.models import CountryRecord
from land_router.graph import build_graph


DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Keep LAND_ROUTER_* variables from the shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("LAND_ROUTER_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def data_dir() -> Path:
    """Return the test data directory."""
    return DATA_DIR


@pytest.fixture
def countries_file(data_dir: Path) -> Path:
    """Small extract of countries.json."""
    return data_dir / "countries.json"


@pytest.fixture
def file_data_config(countries_file: Path) -> CountryDataConfig:
    return CountryDataConfig(source="file", data_file=countries_file)


@pytest.fixture
def sample_records() -> list[CountryRecord]:
    """Western Europe corridor plus two islands."""
    return [
        CountryRecord("CZE", ["AUT"]),
        CountryRecord("AUT", ["CZE", "ITA"]),
        CountryRecord("ITA", ["AUT", "FRA"]),
        CountryRecord("FRA", ["ITA", "ESP"]),
        CountryRecord("ESP", ["FRA"]),
        CountryRecord("JPN", []),
        CountryRecord("KOR", []),
    ]


@pytest.fixture
def sample_graph(sample_records):
    return build_graph(sample_records)
