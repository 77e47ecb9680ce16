"""Pytest integration for redux-spy."""
