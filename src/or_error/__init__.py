"""or-error: one error type for code that mixes many error sources.

``OrError[T]`` is ``Ok[T] | Err[ErrorInfo]``: a Result whose failure payload is
always an ErrorInfo, i.e. the rendered error text plus an optional context.

Flat imports (preferred):
    from or_error import OrError, Ok, Err, ErrorInfo, fail, of_result
    from or_error import safe, result, pipe

Function-style namespace:
    from or_error import core as oe
    oe.bind(oe.return_(1), lambda x: oe.fail(x, 'odd'))

Note that ``or_error.map`` and ``or_error.all`` shadow the builtins under a
star import.
"""

# Configuration
from or_error._config import Config, get_config, init

# Types
from or_error.types import (
    Err,
    ErrorInfo,
    Nothing,
    NothingType,
    Ok,
    Option,
    OrError,
    Propagate,
    Result,
    Some,
    describe,
)

# Errors
from or_error.errors import UnwrapPanic

# Function-style API
from or_error.core import (
    bind,
    bind_,
    fail,
    flatten,
    is_error,
    is_ok,
    lazy_or,
    lazy_unwrap,
    map,
    map_,
    of_result,
    or_,
    pretty_print,
    replace,
    return_,
    unwrap,
    unwrap_panic,
)

# Bulk operations
from or_error.itertools import all, partition, values

# Composition
from or_error.compose import pipe

# Decorators
from or_error.decorators import result, safe

__all__ = [
    'Config',
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
    'UnwrapPanic',
    'all',
    'bind',
    'bind_',
    'describe',
    'fail',
    'flatten',
    'get_config',
    'init',
    'is_error',
    'is_ok',
    'lazy_or',
    'lazy_unwrap',
    'map',
    'map_',
    'of_result',
    'or_',
    'partition',
    'pipe',
    'pretty_print',
    'replace',
    'result',
    'return_',
    'safe',
    'unwrap',
    'unwrap_panic',
    'values',
]
