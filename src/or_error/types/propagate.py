"""Propagate exception for the .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to carry an Err up the call stack.

    This is caught by the @result decorator, which returns the contained Err.
    The name intentionally doesn't end with "Error": it is control flow,
    not a failure of its own.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the Err being propagated.

        Args:
            value: The Err value being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Err value being propagated."""
        return self._value
