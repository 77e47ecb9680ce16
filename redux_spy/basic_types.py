# ruff: noqa: D100, D101, D102, D103, D107
from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from re import Pattern
from typing import Any, Generic, Protocol, TypeAlias

from immutable import Immutable
from typing_extensions import TypeVar


class BaseAction(Immutable): ...


class InitAction(BaseAction): ...


# Type variables
Action = TypeVar('Action', bound=Any, infer_variance=True)
Predicate: TypeAlias = Callable[[Action], Any]
MatchCondition: TypeAlias = str | Pattern[str] | type | Predicate[Action]
ActionTypeResolver: TypeAlias = Callable[[Any], Any]


class Dispatch(Protocol, Generic[Action]):
    def __call__(self: Dispatch, action: Action) -> Any: ...  # noqa: ANN401


class Middleware(Protocol, Generic[Action]):
    def __call__(
        self: Middleware,
        next_dispatch: Dispatch[Action],
    ) -> Dispatch[Action]: ...


class InvalidMatchConditionError(TypeError):
    def __init__(self: InvalidMatchConditionError, condition: object) -> None:
        super().__init__(
            f"""A match condition should be a string, a compiled pattern, an action \
class or a callable, got "{type(condition).__name__}" ({condition!r}).""",
        )


def get_action_type(action: object) -> Any:  # noqa: ANN401
    """Return the tag of an action: its `type` key/attribute or its class name."""
    if isinstance(action, Mapping):
        if 'type' in action:
            return action['type']
    elif hasattr(action, 'type'):
        return action.type  # pyright: ignore [reportAttributeAccessIssue]
    return type(action).__name__


class SpyOptions(Immutable):
    action_type: ActionTypeResolver = get_action_type
    loop: asyncio.AbstractEventLoop | None = None


class PendingWait(Immutable, Generic[Action]):
    predicate: Predicate[Action]
    future: asyncio.Future[Action]
