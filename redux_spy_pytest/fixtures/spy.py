"""Provide spy middlewares for tests."""

from __future__ import annotations

import pytest

from redux_spy.basic_types import SpyOptions
from redux_spy.main import SpyMiddleware, make_spy_middleware


@pytest.fixture
def spy_options() -> SpyOptions | None:
    """Return the options of `action_spy`, override it to customize the spy."""
    return None


@pytest.fixture
def action_spy(spy_options: SpyOptions | None) -> SpyMiddleware:
    """Provide a fresh spy middleware, it still needs to be wired into a store."""
    return make_spy_middleware(spy_options)
