"""Pytest plugin for statebox."""

import os

import pytest

from statebox.utils import PRODUCTION_ENV_VAR


@pytest.hookimpl
def pytest_addoption(parser: pytest.Parser) -> None:
    """Add options to the pytest command line."""
    group = parser.getgroup('statebox', 'statebox options')
    group.addoption(
        '--statebox-production',
        action='store_true',
        help='run stores in production mode, without diagnostic warnings',
    )


@pytest.hookimpl
def pytest_configure(config: pytest.Config) -> None:
    """Set the production flag when requested on the command line."""
    if config.getoption('--statebox-production', default=False):
        os.environ[PRODUCTION_ENV_VAR] = 'true'
