"""Action spy middleware for redux-style stores."""

from .basic_types import (
    Action,
    ActionTypeResolver,
    BaseAction,
    Dispatch,
    InitAction,
    InvalidMatchConditionError,
    MatchCondition,
    Middleware,
    PendingWait,
    Predicate,
    SpyOptions,
    get_action_type,
)
from .main import SpyMiddleware, make_spy_middleware
from .matcher import to_predicate

__all__ = (
    'Action',
    'ActionTypeResolver',
    'BaseAction',
    'Dispatch',
    'InitAction',
    'InvalidMatchConditionError',
    'MatchCondition',
    'Middleware',
    'PendingWait',
    'Predicate',
    'SpyMiddleware',
    'SpyOptions',
    'get_action_type',
    'make_spy_middleware',
    'to_predicate',
)
