"""Shared fixtures; also makes the package importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numerics import Generator  # noqa: E402
from numerics.server import app  # noqa: E402


@pytest.fixture
def gen():
    return Generator(seed=12345)


@pytest.fixture
def client():
    app.config.update(TESTING=True)
    with app.test_client() as c:
        yield c
