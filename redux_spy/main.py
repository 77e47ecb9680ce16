"""Spy middleware recording the actions dispatched through a store."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic

from redux_spy.basic_types import (
    Action,
    Dispatch,
    MatchCondition,
    PendingWait,
    Predicate,
    SpyOptions,
)
from redux_spy.matcher import to_predicate

logger = logging.getLogger(__name__)


def _resolve(future: asyncio.Future[Action], action: Action) -> None:
    if not future.done():
        future.set_result(action)


def _resolve_threadsafe(future: asyncio.Future[Action], action: Action) -> None:
    """Resolve the future on its own loop when that loop runs on another thread."""
    loop = future.get_loop()
    try:
        running_loop = asyncio.get_running_loop()
    except RuntimeError:
        running_loop = None
    if loop is running_loop or not loop.is_running():
        _resolve(future, action)
    else:
        loop.call_soon_threadsafe(_resolve, future, action)


class SpyMiddleware(Generic[Action]):
    """Pass-through middleware keeping a ledger of the actions it sees.

    Actions are recorded after being forwarded to the next stage, then handed to
    the pending waits registered by `until` and `until_next`.
    """

    def __init__(
        self: SpyMiddleware[Action],
        options: SpyOptions | None = None,
    ) -> None:
        """Create a new spy with an empty ledger."""
        self.spy_options = options or SpyOptions()

        self._actions: list[Action] = []
        self._pending_waits: list[PendingWait[Action]] = []

    def __call__(
        self: SpyMiddleware[Action],
        next_dispatch: Dispatch[Action],
    ) -> Dispatch[Action]:
        """Wrap the next stage of the dispatch pipeline."""

        def dispatch(action: Action) -> Any:  # noqa: ANN401
            return self.intercept(next_dispatch, action)

        return dispatch

    def intercept(
        self: SpyMiddleware[Action],
        next_dispatch: Dispatch[Action],
        action: Action,
    ) -> Any:  # noqa: ANN401
        """Forward the action, then record it and resolve the matching waits."""
        result = next_dispatch(action)

        self._actions.append(action)
        logger.debug('Recorded action %r', action)

        # waits registered by the predicates themselves land in the fresh list
        pending_waits, self._pending_waits = self._pending_waits, []
        resolved: list[PendingWait[Action]] = []
        pending: list[PendingWait[Action]] = []
        try:
            for pending_wait in pending_waits:
                if pending_wait.future.done():
                    continue
                if pending_wait.predicate(action):
                    resolved.append(pending_wait)
                else:
                    pending.append(pending_wait)
        except Exception:
            self._pending_waits = pending_waits + self._pending_waits
            raise
        self._pending_waits = pending + self._pending_waits

        for pending_wait in resolved:
            _resolve_threadsafe(pending_wait.future, action)
        if resolved:
            logger.debug('Resolved %d pending wait(s) with %r', len(resolved), action)

        return result

    def get_actions(self: SpyMiddleware[Action]) -> list[Action]:
        """Return a copy of the recorded actions in dispatch order."""
        return self._actions.copy()

    def get_action(
        self: SpyMiddleware[Action],
        condition: MatchCondition[Action],
    ) -> Action | None:
        """Return the most recent recorded action matching the condition."""
        return self._find(self._predicate(condition))

    def clear_actions(self: SpyMiddleware[Action]) -> None:
        """Forget the recorded actions, pending waits are kept."""
        self._actions = []
        logger.debug('Cleared recorded actions')

    def until(
        self: SpyMiddleware[Action],
        condition: MatchCondition[Action],
    ) -> asyncio.Future[Action]:
        """Wait for an action matching the condition, recorded or upcoming.

        If a recorded action already matches, the returned future is resolved with
        the most recent one. Otherwise it resolves with the next dispatched action
        that matches.
        """
        predicate = self._predicate(condition)
        action = self._find(predicate)
        if action is not None:
            future = self._create_future()
            _resolve_threadsafe(future, action)
            return future
        return self._register(predicate)

    def until_next(
        self: SpyMiddleware[Action],
        condition: MatchCondition[Action],
    ) -> asyncio.Future[Action]:
        """Wait for the next dispatched action matching the condition.

        Recorded actions are ignored, even if they match.
        """
        return self._register(self._predicate(condition))

    @property
    def pending_waits(self: SpyMiddleware[Action]) -> int:
        """Number of waits not resolved yet."""
        return sum(
            1 for pending_wait in self._pending_waits if not pending_wait.future.done()
        )

    def _predicate(
        self: SpyMiddleware[Action],
        condition: MatchCondition[Action],
    ) -> Predicate[Action]:
        return to_predicate(condition, self.spy_options.action_type)

    def _find(
        self: SpyMiddleware[Action],
        predicate: Predicate[Action],
    ) -> Action | None:
        for action in reversed(self._actions.copy()):
            if predicate(action):
                return action
        return None

    def _create_future(self: SpyMiddleware[Action]) -> asyncio.Future[Action]:
        loop = self.spy_options.loop or asyncio.get_running_loop()
        return loop.create_future()

    def _register(
        self: SpyMiddleware[Action],
        predicate: Predicate[Action],
    ) -> asyncio.Future[Action]:
        pending_wait = PendingWait(predicate=predicate, future=self._create_future())
        self._pending_waits.append(pending_wait)
        logger.debug('Registered pending wait, %d pending', len(self._pending_waits))
        return pending_wait.future


def make_spy_middleware(options: SpyOptions | None = None) -> SpyMiddleware:
    """Create a spy middleware with its own ledger and pending waits."""
    return SpyMiddleware(options)
