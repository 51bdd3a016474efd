"""Run a test with the production flag set."""

from __future__ import annotations

import pytest

from statebox.utils import PRODUCTION_ENV_VAR


@pytest.fixture
def production(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable diagnostic warnings for the duration of the test."""
    monkeypatch.setenv(PRODUCTION_ENV_VAR, 'true')
