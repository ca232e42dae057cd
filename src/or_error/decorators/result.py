"""@result decorator for catching Propagate exceptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from or_error.types.propagate import Propagate
from or_error.types.result import OrError

__all__ = ['result']

P = ParamSpec('P')
T = TypeVar('T')


def result(func: Callable[P, OrError[T]]) -> Callable[P, OrError[T]]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @result calls .bail() on an Err,
    the Propagate exception is caught and the Err is returned. The body
    reads like straight-line code while behaving like a chain of binds.

    Args:
        func: The function to wrap. Must return an OrError.

    Returns:
        A wrapped function that catches Propagate and returns the contained Err.

    Example:
        ```python
        @result
        def load_port(path: str) -> OrError[int]:
            text = read_text(path).bail()  # returns the Err early
            port = parse_port(text).bail()
            return Ok(port)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, OrError[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> OrError[T]:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value  # type: ignore[no-any-return]

    return wrapper(func)  # type: ignore[return-value]
