"""Result type: Ok[T] | Err[E], and OrError[T] = Ok[T] | Err[ErrorInfo]."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from or_error._logging import get_logger
from or_error.types.error_info import ErrorInfo
from or_error.types.propagate import Propagate

__all__ = ['Err', 'Ok', 'OrError', 'Result']

logger = get_logger(__name__)


def _as_error_info(error: Any) -> ErrorInfo:
    """Return error itself if it is an ErrorInfo, else a context-free ErrorInfo for it."""
    if isinstance(error, ErrorInfo):
        return error
    return ErrorInfo.create(error)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap(0)
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.replace('done')
        Ok(value='done')
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_error(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def pretty_print(self, render: Callable[[T], str] = str) -> str:
        """Render the contained value with ``render``."""
        return render(self.value)

    def unwrap_panic(self) -> T:
        """Return the contained value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value  # type: ignore[return-value]

    def replace[U](self, value: U) -> Ok[U]:
        """Discard the contained value and wrap ``value`` instead."""
        return Ok(value)

    def unwrap(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def lazy_unwrap(self, default: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback function."""
        return self.value

    def or_[E](self, _other: Ok[T] | Err[E]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def lazy_or[E](self, _other: Callable[[], Ok[T] | Err[E]]) -> Ok[T]:
        """Return self without calling the fallback function."""
        return self

    def bail(self) -> T:
        """Return the contained value (no-op for Ok).

        For Err, bail raises Propagate, which the @result decorator turns
        back into a returned Err.
        """
        return self.value

    def __or__[U, E](self, f: Callable[[T], U]) -> Ok[Any] | Err[Any]:
        """Pipe operator for chaining: Ok(x) | f calls f(x) and wraps in Ok.

        If f already returns a Result it is used directly.
        """
        result = f(self.value)
        if isinstance(result, Ok | Err):
            return result
        return Ok(result)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant containing an error of type E.

    Inside an OrError, E is always ErrorInfo.

    Examples:
        >>> err = Err(ErrorInfo.create('boom', 'parsing header'))
        >>> err.is_error()
        True
        >>> err.unwrap(0)
        0
        >>> print(err.pretty_print())
        error: 'boom'
        context: parsing header
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_error(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_error(),
        the type checker knows the result is Err[E].
        """
        return True

    def pretty_print(self, render: Callable[[Any], str] = str) -> str:  # noqa: ARG002
        """Render the failure as ``error: ...`` with an optional ``context: ...`` line."""
        return _as_error_info(self.error).pretty()

    def unwrap_panic(self) -> NoReturn:
        """Raise UnwrapPanic carrying the pretty-printed failure.

        Raises:
            UnwrapPanic: Always, since Err has no value to unwrap.
        """
        info = _as_error_info(self.error)
        logger.error('unwrap_panic', diagnostic=info.pretty())
        raise info.to_exception()

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def bind[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def replace[U](self, _value: U) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def unwrap[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def lazy_unwrap[T](self, default: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return default()

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def lazy_or[T, F](self, other: Callable[[], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Compute and return the alternative since this is Err."""
        return other()

    def bail(self) -> NoReturn:
        """Raise Propagate to carry this error up the call stack.

        When used inside a function decorated with @result, the error
        is caught and returned.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)

    def __or__[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Pipe operator returns self unchanged for Err."""
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]

type OrError[T] = Ok[T] | Err[ErrorInfo]
