"""Error types: exception counterpart of ErrorInfo for raise-based code."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from or_error.types.error_info import ErrorInfo

__all__ = ['UnwrapPanic']


class UnwrapPanic(RuntimeError):
    """A failure was unwrapped where success was required.

    Raised only by ``unwrap_panic``. The message is the pretty-printed
    failure text, so the diagnostic reads exactly like ``pretty_print``.
    """

    def __init__(self, info: ErrorInfo) -> None:
        self.info = info
        super().__init__(info.pretty())

    def to_struct(self) -> ErrorInfo:
        """Convert to struct for Result-based code."""
        return self.info
