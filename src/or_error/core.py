"""Function-style OrError API.

Every function here has a method twin on Ok/Err; both give identical results.
The function forms read naturally in higher-order code, and the curried
``map_`` / ``bind_`` turn a step into a callable over OrError values.

Example:
    ```python
    from or_error import core as oe

    def parse_port(text: str) -> oe.OrError[int]:
        if not text.isdigit():
            return oe.fail(text, 'parsing port')
        return oe.return_(int(text))

    port = oe.bind(read_setting('port'), parse_port)
    print(oe.pretty_print(port))
    ```

``map`` shadows the builtin inside this module; ``return`` and ``or`` are
keywords, hence ``return_`` and ``or_``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from or_error._logging import get_logger
from or_error.types.error_info import ErrorInfo
from or_error.types.result import Err, Ok, OrError, Result

__all__ = [
    'bind',
    'bind_',
    'fail',
    'flatten',
    'is_error',
    'is_ok',
    'lazy_or',
    'lazy_unwrap',
    'map',
    'map_',
    'of_result',
    'or_',
    'pretty_print',
    'replace',
    'return_',
    'unwrap',
    'unwrap_panic',
]

logger = get_logger(__name__)


# --- Construction ---


def return_[T](value: T) -> OrError[T]:
    """Wrap a value in the success variant."""
    return Ok(value)


def fail(error_value: Any, context: str | None = '') -> OrError[Any]:
    """Build a failure from any error value.

    Args:
        error_value: Value describing the failure. Only its rendered text
            (``repr`` by default) survives.
        context: Annotation describing the situation. Empty means none.

    Returns:
        Err wrapping a new ErrorInfo.

    Examples:
        >>> fail('boom')
        Err(error=ErrorInfo(error="'boom'", context=NothingType()))
    """
    info = ErrorInfo.create(error_value, context)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('error_constructed', error=info.error, context=context or None)
    return Err(info)


def of_result[T, E](result: Result[T, E], context: str | None = '') -> OrError[T]:
    """Convert a Result with any error type into an OrError.

    Ok passes through unchanged; Err(e) becomes ``fail(e, context)``.
    """
    if isinstance(result, Err):
        return fail(result.error, context)
    return result


# --- Inspection ---


def is_ok(x: OrError[Any]) -> bool:
    """Return True for a success."""
    return x.is_ok()


def is_error(x: OrError[Any]) -> bool:
    """Return True for a failure."""
    return x.is_error()


def pretty_print[T](x: OrError[T], render: Callable[[T], str] = str) -> str:
    """Render a success with ``render``, a failure as ``error: ...[\\ncontext: ...]``."""
    return x.pretty_print(render)


def unwrap_panic[T](x: OrError[T]) -> T:
    """Return the success value or raise UnwrapPanic.

    Only for failures that indicate a programming error.

    Raises:
        UnwrapPanic: If x is a failure; its message is ``pretty_print(x)``.
    """
    return x.unwrap_panic()


# --- Transformation ---


def map[T, U](x: OrError[T], f: Callable[[T], U]) -> OrError[U]:  # noqa: A001
    """Apply f to a success value; a failure passes through and f is not called."""
    return x.map(f)


def bind[T, U](x: OrError[T], f: Callable[[T], OrError[U]]) -> OrError[U]:
    """Apply a fallible f to a success value and return its result directly."""
    return x.bind(f)


def flatten[T](x: OrError[OrError[T]]) -> OrError[T]:
    """Collapse one level of nesting: ``bind(x, identity)``."""
    return x.flatten()


def replace[T, U](x: OrError[T], value: U) -> OrError[U]:
    """Replace a success value with ``value``; a failure passes through."""
    return x.replace(value)


def map_[T, U](f: Callable[[T], U]) -> Callable[[OrError[T]], OrError[U]]:
    """Curried ``map``: ``map_(f)(x) == map(x, f)``."""

    def apply(x: OrError[T]) -> OrError[U]:
        return x.map(f)

    return apply


def bind_[T, U](f: Callable[[T], OrError[U]]) -> Callable[[OrError[T]], OrError[U]]:
    """Curried ``bind``: ``bind_(f)(x) == bind(x, f)``."""

    def apply(x: OrError[T]) -> OrError[U]:
        return x.bind(f)

    return apply


# --- Extraction with fallback ---


def unwrap[T](x: OrError[T], default: T) -> T:
    """Return the success value, or ``default`` for a failure."""
    return x.unwrap(default)


def lazy_unwrap[T](x: OrError[T], default: Callable[[], T]) -> T:
    """Return the success value, or ``default()`` for a failure.

    ``default`` is called only on the failure path.
    """
    return x.lazy_unwrap(default)


# --- Choice ---


def or_[T](first: OrError[T], second: OrError[T]) -> OrError[T]:
    """Return ``first`` if it is a success, else ``second``."""
    return first.or_(second)


def lazy_or[T](first: OrError[T], second: Callable[[], OrError[T]]) -> OrError[T]:
    """Return ``first`` if it is a success, else ``second()``."""
    return first.lazy_or(second)
