"""Normalize match conditions into predicates over actions."""

from __future__ import annotations

from re import Pattern
from typing import TYPE_CHECKING, cast

from redux_spy.basic_types import (
    Action,
    ActionTypeResolver,
    InvalidMatchConditionError,
    MatchCondition,
    Predicate,
    get_action_type,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def to_predicate(
    condition: MatchCondition[Action],
    action_type: ActionTypeResolver = get_action_type,
) -> Predicate[Action]:
    """Turn a string, a pattern, an action class or a callable into a predicate.

    A string matches actions whose type equals it, a pattern is searched in the
    action type, a class matches its instances and a callable is returned as it
    is.
    """
    if isinstance(condition, str):

        def match_type(action: Action) -> bool:
            return action_type(action) == condition

        return match_type

    if isinstance(condition, Pattern):

        def match_pattern(action: Action) -> bool:
            return condition.search(str(action_type(action))) is not None

        return match_pattern

    if isinstance(condition, type):
        action_class = condition

        def match_class(action: Action) -> bool:
            return isinstance(action, action_class)

        return match_class

    if callable(condition):
        return cast('Callable[[Action], bool]', condition)

    raise InvalidMatchConditionError(condition)
