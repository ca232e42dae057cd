"""Structured logging for or-error.

The library emits two events: ``error_constructed`` (debug, from ``fail``) and
``unwrap_panic`` (error, right before ``UnwrapPanic`` is raised).

Library loggers wrap the stdlib logger of the same name, so nothing is printed
below WARNING until the application configures logging, either here or via
``or_error.init(log_level=...)``. ``configure_logging`` installs structlog's
ProcessorFormatter on the root logger, giving structlog events and plain
stdlib records one rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Processor handing a copy of each event to every registered hook."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue  # a failing hook must not break logging
    return event_dict


def _shared_processors() -> list[Any]:
    """Processors run for structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging through one formatter.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Unknown names fall back to INFO.
        json_output: If True, emit JSON lines. If False, use console output.
        stream: Destination of the rendered records. Defaults to stderr.
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Args:
        name: Logger name, usually the caller's ``__name__``.

    Returns:
        A lazily bound structlog ``stdlib.BoundLogger``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook to be called with a copy of each log event.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
