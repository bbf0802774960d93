"""Aggregation over several Results.

Unlike the sequential operators, these collect error payloads instead of
stopping at the first one. ``r_and``/``product`` behave like logical AND
(every input must succeed), ``r_or``/``sum`` like logical OR (one success
is enough).
"""

from __future__ import annotations

from collections.abc import Iterable

from fallible._internal.shape import check
from fallible.errors import ResultShapeError
from fallible.result import Err, Ok, Result

__all__ = ['product', 'r_and', 'r_or', 'sum']


def r_and[T, U, E, F](left: Result[T, E], right: Result[U, F]) -> Result[list[T | U], list[E | F]]:
    """Succeed only if both sides succeed.

    Raises:
        ResultShapeError: If either side is neither Ok nor Err.

    Examples:
        >>> r_and(Ok(1), Ok(2))
        Ok(value=[1, 2])
        >>> r_and(Ok(1), Err(2))
        Err(error=[2])
        >>> r_and(Err(1), Err(2))
        Err(error=[1, 2])
    """
    match left, right:
        case Ok(v1), Ok(v2):
            return Ok([v1, v2])
        case Ok(), Err(e2):
            return Err([e2])
        case Err(e1), Ok():
            return Err([e1])
        case Err(e1), Err(e2):
            return Err([e1, e2])
    raise ResultShapeError(right if isinstance(left, Ok | Err) else left)


def r_or[T, U, E, F](left: Result[T, E], right: Result[U, F]) -> Result[list[T | U], list[E | F]]:
    """Succeed if either side succeeds, collecting the successful values.

    Examples:
        >>> r_or(Ok(1), Err(2))
        Ok(value=[1])
        >>> r_or(Err(1), Err(2))
        Err(error=[1, 2])
    """
    match left, right:
        case Ok(v1), Ok(v2):
            return Ok([v1, v2])
        case Ok(v1), Err():
            return Ok([v1])
        case Err(), Ok(v2):
            return Ok([v2])
        case Err(e1), Err(e2):
            return Err([e1, e2])
    raise ResultShapeError(right if isinstance(left, Ok | Err) else left)


def product[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Fold Results with AND semantics.

    Values are collected while every Result so far is Ok. The first Err
    switches the accumulator to errors, and every later Err is collected
    too, so the whole iterable is always consumed.

    Raises:
        ResultShapeError: If an element is neither Ok nor Err.

    Examples:
        >>> product([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> product([Err(1), Ok(2), Err(3)])
        Err(error=[1, 3])
        >>> product([])
        Ok(value=[])
    """
    values: list[T] = []
    errors: list[E] = []
    for r in map(check, results):
        if isinstance(r, Err):
            errors.append(r.error)
        elif not errors:
            values.append(r.value)
    if errors:
        return Err(errors)
    return Ok(values)


def sum[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:  # noqa: A001
    """Fold Results with OR semantics.

    Errors are collected while every Result so far is Err. The first Ok
    switches the accumulator to values; from then on Errs are dropped, not
    collected. An empty iterable has no success and yields ``Err([])``.

    Raises:
        ResultShapeError: If an element is neither Ok nor Err.

    Examples:
        >>> sum([Err(1), Err(2), Err(3)])
        Err(error=[1, 2, 3])
        >>> sum([Err(1), Ok(2), Err(3)])
        Ok(value=[2])
        >>> sum([])
        Err(error=[])
    """
    values: list[T] = []
    errors: list[E] = []
    succeeded = False
    for r in map(check, results):
        if isinstance(r, Ok):
            succeeded = True
            values.append(r.value)
        elif not succeeded:
            errors.append(r.error)
    if succeeded:
        return Ok(values)
    return Err(errors)
