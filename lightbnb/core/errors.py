"""Errors raised by the data layer."""
from __future__ import annotations


class StoreFailure(Exception):
    """The store could not execute a statement."""

    def __init__(self, message: str, statement: str | None = None):
        self.message = message
        self.statement = statement
        super().__init__(message)


class StoreDataError(StoreFailure):
    """The store rejected a parameter value, usually a badly typed filter."""
