from __future__ import annotations


class ShapleyError(Exception):
    """Base class for errors raised by the Shapley value library."""


class DuplicateMemberError(ShapleyError, ValueError):
    """Raised when an agent is added to a group that already contains it."""


class InvalidIndexError(ShapleyError, IndexError):
    """Raised when a group prefix is requested outside ``[0, size]``."""
