"""Bulk operations over iterables of OrError values.

All functions consume their input in order with a plain loop, so inputs of a
million elements or more are fine.

Examples:
    >>> all([Ok(1), Ok(2), Ok(3)])
    Ok(value=[1, 2, 3])
    >>> partition([Ok(1), Ok(2), Ok(3)])
    ([3, 2, 1], [])
    >>> values([Ok(1), Err(ErrorInfo.create('skip me')), Ok(3)])
    [1, 3]
"""

from __future__ import annotations

from collections.abc import Iterable

from or_error.types.error_info import ErrorInfo
from or_error.types.result import Err, Ok, OrError

__all__ = ['all', 'partition', 'values']


def all[T](results: Iterable[OrError[T]]) -> OrError[list[T]]:  # noqa: A001
    """Collect an iterable of OrErrors into an OrError of list.

    Short-circuits on the first Err: nothing after it is consumed, so later
    failures never show up in the result.

    Args:
        results: An iterable of OrError values.

    Returns:
        Ok(list[T]) in input order if all results are Ok, otherwise the first Err.
    """
    collected: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        collected.append(result.value)
    return Ok(collected)


def partition[T](results: Iterable[OrError[T]]) -> tuple[list[T], list[ErrorInfo]]:
    """Split an iterable of OrErrors into success values and failures.

    Every element is inspected. Both lists come back in **reverse** input
    order; relative order inside each bucket is otherwise kept.

    Args:
        results: An iterable of OrError values.

    Returns:
        (values, errors), each reversed with respect to the input.

    Examples:
        >>> a, b = ErrorInfo.create('a'), ErrorInfo.create('b')
        >>> partition([Ok(1), Err(a), Ok(2), Err(b)])
        ([2, 1], [ErrorInfo(error="'b'", context=NothingType()), ErrorInfo(error="'a'", context=NothingType())])
    """
    oks: list[T] = []
    errors: list[ErrorInfo] = []
    for result in results:
        if isinstance(result, Err):
            errors.append(result.error)
        else:
            oks.append(result.value)
    oks.reverse()
    errors.reverse()
    return oks, errors


def values[T](results: Iterable[OrError[T]]) -> list[T]:
    """Return the success values in input order, dropping failures."""
    return [result.value for result in results if isinstance(result, Ok)]
