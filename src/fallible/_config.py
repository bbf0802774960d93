"""Library configuration: Config, init, and get_config."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fallible._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_RETRY_DELAY',
    'Config',
    'get_config',
    'init',
    'reset_config',
]

DEFAULT_RETRY_DELAY = 1.0

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Configuration for fallible.

    Attributes:
        retry_delay: Seconds ``retry`` waits between attempts when the
            caller does not pass a delay.
        log_level: Logging level (e.g., "DEBUG"). None = leave logging alone.
    """

    retry_delay: float = DEFAULT_RETRY_DELAY
    log_level: str | None = None


# Global configuration (set by init(), or lazily by get_config())
_config: Config | None = None


def _detect_retry_delay() -> float:
    """Read the default retry delay from FALLIBLE_RETRY_DELAY.

    Unparsable or negative values are logged and ignored.
    """
    raw = os.environ.get('FALLIBLE_RETRY_DELAY', '').strip()
    if not raw:
        return DEFAULT_RETRY_DELAY
    try:
        delay = float(raw)
    except ValueError:
        logger.warning('config.invalid_retry_delay', value=raw, default=DEFAULT_RETRY_DELAY)
        return DEFAULT_RETRY_DELAY
    if delay < 0:
        logger.warning('config.negative_retry_delay', value=raw, default=DEFAULT_RETRY_DELAY)
        return DEFAULT_RETRY_DELAY
    return delay


def _detect_log_level() -> str | None:
    return os.environ.get('FALLIBLE_LOG_LEVEL') or None


def init(
    retry_delay: float | None = None,
    log_level: str | None = None,
) -> Config:
    """Initialize fallible with the given configuration.

    Args:
        retry_delay: Default delay in seconds between retry attempts.
            Read from FALLIBLE_RETRY_DELAY if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            FALLIBLE_LOG_LEVEL if None; when still None, logging is not
            configured.

    Returns:
        The Config that was set.

    Raises:
        ValueError: If retry_delay is negative.

    Example:
        ```python
        import fallible

        fallible.init(retry_delay=0.25, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if retry_delay is None:
        resolved_delay = _detect_retry_delay()
    elif retry_delay < 0:
        msg = f'retry_delay must be non-negative, got {retry_delay}'
        raise ValueError(msg)
    else:
        resolved_delay = float(retry_delay)

    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = Config(retry_delay=resolved_delay, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Before init() has been called this reads the environment once and keeps
    the result, but it never configures logging; only an explicit init()
    does that.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = Config(retry_delay=_detect_retry_delay(), log_level=_detect_log_level())
    return _config


def reset_config() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
