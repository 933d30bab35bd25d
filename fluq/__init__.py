"""
fluq: eager, fluent queries over sequences and dictionaries.

    >>> from fluq import P
    >>> P([3, 1, 2, 1]).distinct().sort().to.list()
    [1, 2, 3]
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable
from .dictionary import Dictionary

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    from_dict,
    fluq,
    P,
    D
)

# expose errors and the absent marker
from .errors import (
    QueryError,
    EmptySequenceError,
    InvalidArgumentError,
    MultipleElementsError
)
from .types import NIL, is_nil
from .config import QueryConfig, configure, configure_logging

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Dictionary",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "from_dict",
    "fluq",
    "P",
    "D",
    "QueryError",
    "EmptySequenceError",
    "InvalidArgumentError",
    "MultipleElementsError",
    "NIL",
    "is_nil",
    "QueryConfig",
    "configure",
    "configure_logging"
]
