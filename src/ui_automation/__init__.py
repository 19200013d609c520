"""Condition polling and retrying page interactions for browser tests."""

__version__ = "0.1.0"
