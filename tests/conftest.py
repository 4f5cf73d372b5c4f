"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from fxboard import create_app  # noqa: E402


@pytest.fixture()
def app(tmp_path: Path) -> Iterator:
    """Flask application wired to the mock provider and a temporary snapshot."""

    snapshot_path = tmp_path / "rates.csv"
    snapshot_path.write_text("currency,rate\nUSD,1.0000\nJPY,150.2500\nEUR,0.9210\n")

    flask_app = create_app("testing")
    flask_app.config.update(SNAPSHOT_PATH=str(snapshot_path))
    yield flask_app


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""

    with app.test_client() as client:
        yield client


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return the path to bundled JSON fixtures."""

    return ROOT_DIR / "tests" / "fixtures"
