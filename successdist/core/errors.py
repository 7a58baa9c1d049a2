"""
successdist.core.errors
=======================

Exceptions raised by successdist.

Queries are deterministic, so there is nothing to retry: a caller that gets
an `InvalidArgumentError` has to fix its input.

Examples
--------
>>> from successdist.core.errors import InvalidArgumentError
>>> issubclass(InvalidArgumentError, ValueError)
True
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a query receives arguments outside its domain."""
