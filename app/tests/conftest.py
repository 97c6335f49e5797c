"""Shared fixtures for localization tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the on-disk translation fixture trees."""
    return FIXTURES_DIR


@pytest.fixture
def good_location(fixtures_dir) -> str:
    return str(fixtures_dir / "good")


@pytest.fixture
def bad_location(fixtures_dir) -> str:
    return str(fixtures_dir / "bad")
