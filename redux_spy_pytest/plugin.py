"""Pytest plugin for redux-spy."""

import logging
import os

import pytest
from str_to_bool import str_to_bool


@pytest.hookimpl
def pytest_addoption(parser: pytest.Parser) -> None:
    """Add options to the pytest command line."""
    group = parser.getgroup('redux_spy', 'redux spy options')
    group.addoption(
        '--spy-log-actions',
        action='store_true',
        default=str_to_bool(os.environ.get('REDUX_SPY_LOG_ACTIONS', 'false')) == 1,
        help='Log actions recorded by spy middlewares.',
    )


@pytest.hookimpl
def pytest_configure(config: pytest.Config) -> None:
    """Make the spy loggers verbose if asked to."""
    if config.getoption('--spy-log-actions', default=False) is True:
        logging.getLogger('redux_spy').setLevel(logging.DEBUG)
