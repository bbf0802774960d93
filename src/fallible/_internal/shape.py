"""Runtime guard for values that must already be a Result."""

from __future__ import annotations

from typing import Any

from fallible.errors import ResultShapeError
from fallible.result import Err, Ok

__all__ = ['check']


def check[T, E](value: Ok[T] | Err[E] | Any) -> Ok[T] | Err[E]:
    """Return value unchanged if it is Ok or Err.

    Raises:
        ResultShapeError: If value is neither variant.

    Examples:
        >>> check(Ok(1))
        Ok(value=1)
        >>> check('FOO')
        Traceback (most recent call last):
        ...
        fallible.errors.ResultShapeError: Expected Ok or Err, got str: 'FOO'
    """
    if isinstance(value, Ok | Err):
        return value
    raise ResultShapeError(value)
