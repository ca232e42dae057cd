"""ErrorInfo: the single failure payload carried by every OrError."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import msgspec

from or_error._config import get_config
from or_error.types.option import NothingType, Option, Some, from_text

if TYPE_CHECKING:
    from or_error.errors import UnwrapPanic

__all__ = ['ErrorInfo', 'describe']


def describe(value: Any) -> str:
    """Render any value as deterministic, debug-style text.

    Uses the configured renderer, which is ``repr`` unless replaced through
    ``or_error.init(renderer=...)``. If the renderer raises or returns a
    non-string, the value falls back to ``object.__repr__``, so rendering
    never fails.

    Examples:
        >>> describe('boom')
        "'boom'"
        >>> describe(ValueError('bad port'))
        "ValueError('bad port')"
        >>> describe({'line': 3})
        "{'line': 3}"
    """
    try:
        text = get_config().renderer(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)
    if not isinstance(text, str):
        return object.__repr__(value)
    return text


class ErrorInfo(msgspec.Struct, frozen=True, gc=False):
    """Failure record: rendered error text plus optional context.

    Once built, ``error`` is the only surviving trace of the original error
    value. ``context`` is ``Some(text)`` for a non-empty annotation and
    ``Nothing`` otherwise; use ``ErrorInfo.create`` to get that normalization.
    Direct construction with any other context (``Some('')``, a bare string,
    ``None``) is rejected.

    Examples:
        >>> ErrorInfo.create(KeyError('port'), 'loading settings')
        ErrorInfo(error="KeyError('port')", context=Some(value='loading settings'))
        >>> print(ErrorInfo.create('boom'))
        error: 'boom'
    """

    error: str
    context: Option[str]

    def __post_init__(self) -> None:
        if not isinstance(self.error, str):
            msg = f'ErrorInfo.error must be str, got {type(self.error).__name__}'
            raise TypeError(msg)
        if isinstance(self.context, NothingType):
            return
        if not isinstance(self.context, Some) or not isinstance(self.context.value, str):
            msg = (
                f'ErrorInfo.context must be Some(str) or Nothing, got {self.context!r}; '
                'use ErrorInfo.create() to normalize plain text'
            )
            raise TypeError(msg)
        if not self.context.value:
            msg = "ErrorInfo.context must not be Some(''); use Nothing for no context"
            raise ValueError(msg)

    @classmethod
    def create(cls, error_value: Any, context: str | None = '') -> ErrorInfo:
        """Build an ErrorInfo from an arbitrary error value.

        Args:
            error_value: Any value describing the failure; only its rendered
                text is kept.
            context: Human-supplied annotation. Empty or None means no context.

        Returns:
            A new ErrorInfo.
        """
        return cls(error=describe(error_value), context=from_text(context))

    def has_context(self) -> bool:
        """Return True if a context annotation is present."""
        return self.context.is_some()

    def pretty(self) -> str:
        """Render as ``error: <error>`` plus ``\\ncontext: <context>`` if present.

        There is never a trailing newline.
        """
        if isinstance(self.context, Some):
            return f'error: {self.error}\ncontext: {self.context.value}'
        return f'error: {self.error}'

    def __str__(self) -> str:
        return self.pretty()

    def to_exception(self) -> UnwrapPanic:
        """Convert to exception for raise-based code."""
        from or_error.errors import UnwrapPanic

        return UnwrapPanic(self)
