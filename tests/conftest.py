"""Pytest configuration file for the tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from redux_spy.basic_types import InitAction
from redux_spy_pytest.fixtures import action_spy, spy_options

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from redux_spy.basic_types import Middleware
    from redux_spy.main import SpyMiddleware

__all__ = [
    'action_spy',
    'spy_options',
]


def reducer(state: tuple | None, action: object) -> tuple:
    return (*(state or ()), action)


class Store:
    """Minimal store running its middlewares ahead of its reducer."""

    def __init__(
        self: Store,
        reducer: Callable[[Any, Any], Any],
        middlewares: Sequence[Middleware] = (),
    ) -> None:
        self.reducer = reducer
        self.state = None
        self._reduce(InitAction())

        dispatch = self._reduce
        for middleware in reversed(middlewares):
            dispatch = middleware(dispatch)
        self.dispatch = dispatch

    def _reduce(self: Store, action: object) -> object:
        self.state = self.reducer(self.state, action)
        return action


@pytest.fixture
def make_store() -> Callable[..., Store]:
    """Provide a factory of stores wired with the given middlewares."""

    def make(*middlewares: Middleware) -> Store:
        return Store(reducer, middlewares=middlewares)

    return make


@pytest.fixture
def store(action_spy: SpyMiddleware, make_store: Callable[..., Store]) -> Store:
    return make_store(action_spy)
