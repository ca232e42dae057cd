"""Decorators: @safe and @result."""

from or_error.decorators.result import result
from or_error.decorators.safe import safe

__all__ = [
    'result',
    'safe',
]
