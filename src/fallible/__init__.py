"""fallible: a Result type and combinators for fallible computations.

Flat imports (preferred):
    from fallible import Ok, Err, Result, ok, error
    from fallible import and_then, map, map_error, catch_error, fold
    from fallible import r_and, r_or, product, sum, retry

Submodule imports (for organization):
    from fallible.result import Ok, Err, Result
    from fallible.operators import and_then, resolve
    from fallible.calc import product, sum
    from fallible.retry import retry

``map`` and ``sum`` shadow the builtins of the same name when imported
unqualified; ``import fallible as fl`` avoids that.
"""

# Configuration
from fallible._config import Config, get_config, init, reset_config

# Shape checking
from fallible._internal.shape import check

# Logging
from fallible._logging import configure_logging, get_logger

# Aggregation
from fallible.calc import product, r_and, r_or, sum
from fallible.errors import ResultShapeError

# Sequential operators
from fallible.operators import (
    and_then,
    and_then_x,
    catch_all_errors,
    catch_error,
    fold,
    from_,
    is_error,
    is_ok,
    map,
    map2,
    map_error,
    perform,
    resolve,
    with_default,
)

# Types
from fallible.result import Err, Ok, Result, Tag, error, ok

# Retry
from fallible.retry import retry

__all__ = [
    # Configuration
    'Config',
    # Result types
    'Err',
    'Ok',
    'Result',
    'ResultShapeError',
    'Tag',
    # Sequential operators
    'and_then',
    'and_then_x',
    'catch_all_errors',
    'catch_error',
    'check',
    'configure_logging',
    'error',
    'fold',
    'from_',
    'get_config',
    'get_logger',
    'init',
    'is_error',
    'is_ok',
    'map',
    'map2',
    'map_error',
    'ok',
    'perform',
    # Aggregation
    'product',
    'r_and',
    'r_or',
    'reset_config',
    'resolve',
    # Retry
    'retry',
    'sum',
    'with_default',
]
