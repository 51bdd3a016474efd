"""Pytest configuration file for the tests."""

from __future__ import annotations

import random
import uuid

import pytest

from statebox_pytest.fixtures import production, store, store_monitor

__all__ = [
    'production',
    'store',
    'store_monitor',
]


@pytest.fixture(autouse=True)
def _(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make random action types reproducible."""
    random.seed(0)

    monkeypatch.setattr(uuid, 'uuid4', lambda: uuid.UUID(int=random.getrandbits(128)))
