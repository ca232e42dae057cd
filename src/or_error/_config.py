"""Library configuration: Config, init() and get_config()."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from or_error._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'OR_ERROR_LOG_LEVEL'
_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Config:
    """Configuration for or-error.

    Attributes:
        renderer: Turns an arbitrary error value into the text stored in
            ``ErrorInfo.error``. Must be deterministic.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when logging is configured, else console output.
    """

    renderer: Callable[[Any], str] = repr
    log_level: str | None = None
    json_logs: bool = True


_DEFAULT = Config()

# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from the OR_ERROR_LOG_LEVEL environment variable.

    Unknown values are reported and ignored.
    """
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown %s value '%s', logging stays off", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def init(
    renderer: Callable[[Any], str] | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> Config:
    """Initialize or-error with the specified configuration.

    Args:
        renderer: Value renderer used by ``fail``. Defaults to ``repr``.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            OR_ERROR_LOG_LEVEL if None; None there too means silent.
        json_logs: JSON (True) or console (False) log rendering.

    Returns:
        The Config that was set.

    Raises:
        TypeError: If renderer is not callable.
        ValueError: If log_level is not a known level name.

    Example:
        ```python
        import or_error

        or_error.init(log_level='DEBUG', json_logs=False)
        or_error.init(renderer=str)
        ```
    """
    global _config  # noqa: PLW0603

    if renderer is None:
        renderer = repr
    elif not callable(renderer):
        msg = f'renderer must be callable, got {type(renderer).__name__}'
        raise TypeError(msg)

    if log_level is None:
        resolved_level = _detect_log_level()
    elif log_level.upper() in _LEVELS:
        resolved_level = log_level.upper()
    else:
        msg = f'Unknown log level {log_level!r}; expected one of {", ".join(_LEVELS)}'
        raise ValueError(msg)

    _config = Config(renderer=renderer, log_level=resolved_level, json_logs=json_logs)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns:
        The Config set by ``init()``, or the defaults if it was never called.
    """
    if _config is None:
        return _DEFAULT
    return _config
