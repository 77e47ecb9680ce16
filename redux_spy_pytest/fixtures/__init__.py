"""Utility fixtures for testing with spy middlewares."""

from .spy import action_spy, spy_options

__all__ = ('action_spy', 'spy_options')
