"""Provide store for tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from statebox.basic_types import Store


@pytest.fixture
def store() -> Store:  # pragma: no cover
    """Provide current store (this is a placeholder raising an error)."""
    msg = 'This fixture should be overridden.'
    raise NotImplementedError(msg)
