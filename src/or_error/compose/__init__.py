"""Composition utilities: pipe() function."""

from or_error.compose.pipe import pipe

__all__ = [
    'pipe',
]
