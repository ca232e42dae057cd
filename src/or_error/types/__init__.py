"""Core types: OrError, Ok, Err, ErrorInfo, Option, Some, Nothing."""

from or_error.types.error_info import ErrorInfo, describe
from or_error.types.option import Nothing, NothingType, Option, Some
from or_error.types.propagate import Propagate
from or_error.types.result import Err, Ok, OrError, Result

__all__ = [
    'Err',
    'ErrorInfo',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OrError',
    'Propagate',
    'Result',
    'Some',
    'describe',
]
