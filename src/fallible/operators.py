"""Sequential operators over Result.

Functions run only on the Ok path unless their name says otherwise; an Err
flows through untouched unless an operator explicitly recovers from it.

Example:
    ```python
    from fallible import Err, Ok, and_then, map, with_default

    parsed = and_then(Ok('42'), lambda s: Ok(int(s)) if s.isdigit() else Err(s))
    doubled = map(parsed, lambda n: n * 2)
    with_default(doubled, 0)  # 84
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeGuard

from fallible._internal.shape import check
from fallible.result import Err, Ok, Result, Tag

__all__ = [
    'and_then',
    'and_then_x',
    'catch_all_errors',
    'catch_error',
    'fold',
    'from_',
    'is_error',
    'is_ok',
    'map',
    'map2',
    'map_error',
    'perform',
    'resolve',
    'with_default',
]


def and_then[T, U, E](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation that may fail.

    Args:
        r: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        Result[U, E]: f(value) if r is Ok, otherwise the original Err.

    Examples:
        >>> and_then(Ok(1), lambda x: Ok(x + 1))
        Ok(value=2)
        >>> and_then(Err(1), lambda x: Ok(x + 1))
        Err(error=1)
    """
    return r.and_then(f)


def and_then_x[T, E](results: Sequence[Result[T, E]], f: Callable[[T, T], Result[T, E]]) -> Result[T | None, E]:
    """Chain a two-argument computation across a list of Results.

    The unwrapped values are threaded through a left fold: ``f`` is called
    with the accumulated value and the next value, and its Result becomes
    the new accumulator. The first Err, whether found in the list or
    returned by ``f``, ends the fold.

    Args:
        results: The Results to combine, scanned left to right.
        f: Function of (accumulator, value) returning a Result.

    Returns:
        Ok(None) for an empty list, otherwise the last Result produced,
        or the first Err encountered.

    Examples:
        >>> and_then_x([Ok(1), Ok(2)], lambda x, y: Ok(x + y))
        Ok(value=3)
        >>> and_then_x([Ok(1), Err('ERROR')], lambda x, y: Ok(x + y))
        Err(error='ERROR')
    """
    if not results:
        return Ok(None)

    first, *rest = results
    if isinstance(first, Err):
        return first

    acc: Result[T, E] = first
    for r in rest:
        if isinstance(r, Err):
            return r
        acc = f(acc.value, r.value)
        if isinstance(acc, Err):
            return acc
    return acc


def map[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply f to the value if r is Ok, wrapping the return value in Ok.

    Examples:
        >>> map(Ok(10), lambda x: x + 3)
        Ok(value=13)
        >>> map(Err(3), lambda x: x + 3)
        Err(error=3)
    """
    return r.map(f)


def map2[T1, T2, U, E](r1: Result[T1, E], r2: Result[T2, E], f: Callable[[T1, T2], U]) -> Result[U, E]:
    """Apply f to both values if both Results are Ok.

    If r1 is Err it is returned without looking at r2; otherwise an Err
    in r2 is returned.

    Examples:
        >>> map2(Ok(1), Ok(2), lambda a, b: a + b)
        Ok(value=3)
        >>> map2(Err(1), Err(2), lambda a, b: a + b)
        Err(error=1)
    """
    if isinstance(r1, Err):
        return r1
    if isinstance(r2, Err):
        return r2
    return Ok(f(r1.value, r2.value))


def map_error[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply f to the error if r is Err, wrapping the return value in Err.

    Useful for trimming an error payload down to what callers need.

    Examples:
        >>> map_error(Err('error'), str.upper)
        Err(error='ERROR')
        >>> map_error(Ok(3), str.upper)
        Ok(value=3)
    """
    return r.map_err(f)


def catch_error[T, E, F](r: Result[T, E], expected: E, f: Callable[[E], Result[T, F]]) -> Result[T, E | F]:
    """Recover from one specific error.

    If r is Err and its payload equals ``expected``, return ``f(expected)``.
    Any other Err, and every Ok, passes through untouched.

    Raises:
        ResultShapeError: If f returns something other than Ok or Err.

    Examples:
        >>> catch_error(Err('foo'), 'foo', lambda e: Ok(e.upper()))
        Ok(value='FOO')
        >>> catch_error(Err('bar'), 'foo', lambda e: Ok(e.upper()))
        Err(error='bar')
    """
    if isinstance(r, Err) and r.error == expected:
        return check(r.recover(f))
    return r


def catch_all_errors[T, E, F](r: Result[T, E], f: Callable[[E], Result[T, F]]) -> Result[T, F]:
    """Recover from any error by passing its payload to f.

    Raises:
        ResultShapeError: If f returns something other than Ok or Err.

    Examples:
        >>> catch_all_errors(Err('bar'), lambda e: Ok(e))
        Ok(value='bar')
        >>> catch_all_errors(Ok(3), lambda e: Ok(e))
        Ok(value=3)
    """
    return check(r.recover(f))


def perform[T, E](r: Result[T, E], f: Callable[[T], Any]) -> Result[T, E]:
    """Call f with the value for its side effect if r is Ok.

    The return value of f is discarded and r is returned unchanged.
    """
    return r.perform(f)


def with_default[T, E](r: Result[T, E], default: T) -> T:
    """Return the value if r is Ok, otherwise default.

    Examples:
        >>> with_default(Ok(123), 456)
        123
        >>> with_default(Err(123), 456)
        456
    """
    return r.unwrap_or(default)


def is_error[T, E](r: Result[T, E]) -> TypeGuard[Err[E]]:
    """Return True if r is Err."""
    return r.is_err()


def is_ok[T, E](r: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Return True if r is Ok."""
    return r.is_ok()


def resolve[T, E](r: Result[Result[T, E], E]) -> Result[T, E]:
    """Flatten one level of nesting.

    Ok(Ok(v)) -> Ok(v), Ok(Err(e)) -> Err(e), Err(e) -> Err(e).

    Raises:
        ResultShapeError: If r is Ok but its value is not a Result.
    """
    if isinstance(r, Ok):
        return check(r.value)
    return r


def from_(maybe: Any, fallback: Any) -> Result[Any, Any]:
    """Normalize a loosely shaped value into a Result.

    - ``None`` becomes ``Err(fallback)``.
    - ``Tag.OK`` / ``Tag.ERROR`` become ``Ok(fallback)`` / ``Err(fallback)``.
    - An existing Ok or Err is returned as is; ``fallback`` is ignored.
    - Any other value becomes ``Ok(maybe)``.

    Examples:
        >>> from_(123, 'msg')
        Ok(value=123)
        >>> from_(None, 'msg')
        Err(error='msg')
        >>> from_(Tag.ERROR, 456)
        Err(error=456)
    """
    if maybe is None:
        return Err(fallback)
    if maybe is Tag.OK:
        return Ok(fallback)
    if maybe is Tag.ERROR:
        return Err(fallback)
    if isinstance(maybe, Ok | Err):
        return maybe
    return Ok(maybe)


def fold[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect the values of Results, short-circuiting on the first Err.

    The iterable is not consumed past the first Err.

    Examples:
        >>> fold([Ok(3), Ok(5), Ok(12)])
        Ok(value=[3, 5, 12])
        >>> fold([Ok(3), Err(1), Ok(2), Err(2)])
        Err(error=1)
    """
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(values)
