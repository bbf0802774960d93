"""Result type: Ok[T] | Err[E] for outcomes of fallible computations."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'Tag', 'error', 'ok']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant: a computation that produced ``value``.

    The methods are the Ok half of each operator in ``fallible.operators``;
    functions supplied for the success path run here, the error-path ones
    are ignored.

    Examples:
        >>> Ok(21).map(lambda x: x * 2)
        Ok(value=42)
        >>> Ok(21).recover(lambda e: Ok(0))
        Ok(value=21)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def unwrap_or(self, _default: object) -> T:
        """Return the value; the fallback is only used by Err."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Wrap ``f(value)`` in a new Ok."""
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Hand the value to the next fallible step and return its outcome."""
        return f(self.value)

    def perform(self, f: Callable[[T], Any]) -> Ok[T]:
        """Run ``f(value)`` for its side effect and return self."""
        f(self.value)
        return self

    def recover(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant: a computation that failed with ``error``.

    The payload is opaque to the library: a string, an exception instance,
    a struct, whatever the caller chose. Success-path functions passed to
    these methods are never called.

    Examples:
        >>> Err('timeout').map(lambda x: x * 2)
        Err(error='timeout')
        >>> Err('timeout').recover(lambda e: Ok(f'retried after {e}'))
        Ok(value='retried after timeout')
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value.

        Raises:
            RuntimeError: Always, naming the error payload.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[D](self, default: D) -> D:
        """Return the fallback in place of the missing value."""
        return default

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Wrap ``f(error)`` in a new Err."""
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def perform(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def recover[R](self, f: Callable[[E], R]) -> R:
        """Return whatever ``f(error)`` produces.

        The return value is not checked here; ``catch_error`` and
        ``catch_all_errors`` validate that it is a Result.
        """
        return f(self.error)


type Result[T, E] = Ok[T] | Err[E]


class Tag(Enum):
    """Bare success/failure markers understood by ``from_``.

    A marker carries no payload of its own; ``from_`` pairs it with the
    supplied fallback value.
    """

    OK = 'ok'
    ERROR = 'error'


def ok[T](value: T) -> Ok[T]:
    """Create an Ok result from any value.

    Examples:
        >>> ok('a')
        Ok(value='a')
    """
    return Ok(value)


def error[E](value: E) -> Err[E]:
    """Create an Err result from any value.

    Examples:
        >>> error(12345)
        Err(error=12345)
    """
    return Err(value)
