# dimensia.core.errors

from __future__ import annotations


class DimensiaError(Exception):
    """Base class for every error raised by dimensia."""


class InvariantError(DimensiaError, AssertionError):
    """
    An internal invariant was violated (e.g. a stored exponent of 0).

    These indicate a bug in whatever built the offending object, not bad user
    input, so nothing inside the package tries to recover from them.
    """


class StorageError(InvariantError, LookupError):
    """An identity was looked up in a storage that never issued it."""


__all__ = ["DimensiaError", "InvariantError", "StorageError"]
