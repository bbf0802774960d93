"""Bounded retry of a fallible step."""

from __future__ import annotations

import time
from collections.abc import Callable

from fallible._config import get_config
from fallible._logging import get_logger
from fallible.result import Err, Result

__all__ = ['retry']

logger = get_logger(__name__)


def retry[S, T, E](
    result: Result[S, E],
    f: Callable[[S], Result[T, E]],
    count: int,
    delay: float | None = None,
    *,
    sleep: Callable[[float], object] = time.sleep,
) -> Result[T, E]:
    """Call f with the seed until it succeeds or count attempts are used.

    Every attempt receives the original seed (the value inside ``result``).
    The first Ok ends the loop. Between failed attempts the calling thread
    blocks for ``delay`` seconds; there is no sleep after the last attempt.

    Args:
        result: Ok(seed) to start retrying, or an Err that is returned
            immediately without calling f.
        f: The fallible step.
        count: Maximum number of attempts. Values below 1 still make one
            attempt.
        delay: Seconds to wait between attempts. Defaults to
            ``get_config().retry_delay`` (1.0 unless configured).
        sleep: Blocking delay primitive.

    Returns:
        The first Ok returned by f, or the Err from the final attempt.

    Raises:
        ValueError: If result is Ok and delay is negative.

    Example:
        ```python
        attempts = iter([Err('busy'), Ok('done')])
        retry(Ok('job-1'), lambda seed: next(attempts), 3, 0)
        # Ok(value='done')
        ```
    """
    if isinstance(result, Err):
        return result

    if delay is None:
        delay = get_config().retry_delay
    elif delay < 0:
        msg = f'delay must be non-negative, got {delay}'
        raise ValueError(msg)

    seed = result.value
    attempts = max(count, 1)
    outcome = f(seed)
    attempt = 1
    while isinstance(outcome, Err) and attempt < attempts:
        logger.debug(
            'retry.attempt_failed',
            attempt=attempt,
            remaining=attempts - attempt,
            delay=delay,
            error=repr(outcome.error),
        )
        if delay > 0:
            sleep(delay)
        outcome = f(seed)
        attempt += 1

    if isinstance(outcome, Err):
        logger.debug('retry.exhausted', attempts=attempts, error=repr(outcome.error))
    return outcome
