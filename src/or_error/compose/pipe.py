"""pipe() function for threading a value through OrError-returning steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from or_error.types.result import Err, Ok, OrError

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')


def _wrap_value(value: Any) -> OrError[Any]:
    """Wrap a value in Ok if it's not already an Ok/Err."""
    if isinstance(value, Ok | Err):
        return value
    return Ok(value)


@overload
def pipe[T](value: T, /) -> OrError[T]: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> OrError[T1]: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> OrError[T2]: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> OrError[T3]: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> OrError[T4]: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> OrError[T5]: ...
@overload
def pipe(value: Any, /, *fns: Callable[..., Any]) -> OrError[Any]: ...


def pipe(value: Any, /, *fns: Callable[..., Any]) -> OrError[Any]:
    """Compose functions in sequence, threading a value through them.

    The initial value is wrapped in Ok() if not already an Ok/Err.
    Each function is applied to the unwrapped value from the previous step.
    If a function returns an Ok/Err, it's used directly (bind); otherwise the
    return value is wrapped in Ok (map). Short-circuits on the first Err:
    later functions are never called.

    Args:
        value: The initial value to thread through the functions.
        *fns: Functions to apply in sequence.

    Returns:
        The final OrError after applying all functions.

    Example:
        ```python
        pipe(5, lambda x: x + 1, lambda x: x * 2)
        # Ok(value=12)

        pipe(Ok('8080'), parse_port, lambda port: ('localhost', port))
        # Ok(value=('localhost', 8080))

        pipe('x', lambda s: fail(s, 'parsing port'), str.upper)
        # Err(error=ErrorInfo(error="'x'", context=Some(value='parsing port')))
        ```
    """
    current = _wrap_value(value)
    for fn in fns:
        if isinstance(current, Err):
            return current
        current = _wrap_value(fn(current.value))
    return current
