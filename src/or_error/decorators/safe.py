"""@safe decorator for turning raised exceptions into OrError failures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from or_error.core import fail
from or_error.types.result import Ok, OrError

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, OrError[T]]: ...


@overload
def safe(
    func: None = None,
    *,
    context: str = '',
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, OrError[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    context: str = '',
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns them as OrError failures.

    Wraps a function so that it returns Ok(value) on success and
    ``fail(exception, context)`` if one of ``exceptions`` is raised.
    Anything else propagates.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(context='reading settings', exceptions=(OSError,))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        context: Context attached to every failure produced by the wrapper.
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns OrError[T] instead of T.

    Example:
        ```python
        @safe(context='dividing')
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ErrorInfo(error="ZeroDivisionError('division by zero')",
        #                     context=Some(value='dividing')))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> OrError[T]:
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            return fail(e, context)
        return Ok(value)

    if func is not None:
        return wrapper(func)
    return wrapper
