"""Shape violation raised when a value that must be a Result is not one."""

from __future__ import annotations

from typing import Any

__all__ = ['ResultShapeError']


class ResultShapeError(TypeError):
    """A value expected to be Ok or Err was something else.

    This signals broken caller code (for example a recovery function passed
    to ``catch_error`` that forgot to wrap its return value), never a domain
    failure, so it is raised rather than returned.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'Expected Ok or Err, got {type(value).__name__}: {value!r}')
