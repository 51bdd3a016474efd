"""Utility fixtures for testing statebox stores."""

import pytest

pytest.register_assert_rewrite(
    'statebox_pytest.fixtures.monitor',
    'statebox_pytest.fixtures.production',
    'statebox_pytest.fixtures.store',
)

from .monitor import StoreMonitor, store_monitor  # noqa: E402
from .production import production  # noqa: E402
from .store import store  # noqa: E402

__all__ = (
    'StoreMonitor',
    'production',
    'store',
    'store_monitor',
)
