"""
error taxonomy for the query engines.

failures raised by caller-supplied selectors, predicates and accumulators are
never wrapped: they reach the caller exactly as raised.
"""
import logging
from .types import *

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """base class for errors raised by fluq itself"""
    pass


class EmptySequenceError(QueryError, ValueError):
    """an operator with no defined result for empty input was given an empty sequence"""
    pass


class InvalidArgumentError(QueryError, ValueError):
    """a structurally invalid argument was passed to an operator"""
    pass


class MultipleElementsError(QueryError, ValueError):
    """single() found more than one matching element"""
    pass


def require_callable(func: Any, name: str) -> None:
    """raise if a mandatory function argument is missing or not callable"""
    if func is None:
        logger.debug("rejected missing %s", name)
        raise InvalidArgumentError(f"{name} is required")
    if not callable(func):
        logger.debug("rejected non-callable %s: %r", name, func)
        raise InvalidArgumentError(f"{name} must be callable, got {type(func).__name__}")


def require_optional_callable(func: Any, name: str) -> None:
    if func is not None:
        require_callable(func, name)


def require_count(count: Any, name: str = "count") -> int:
    """validate a non-negative integer count. bools are rejected."""
    if isinstance(count, bool) or not isinstance(count, int):
        logger.debug("rejected non-integer %s: %r", name, count)
        raise InvalidArgumentError(f"{name} must be an integer, got {type(count).__name__}")
    if count < 0:
        logger.debug("rejected negative %s: %d", name, count)
        raise InvalidArgumentError(f"{name} must be non-negative, got {count}")
    return count


def require_positive(size: Any, name: str = "size") -> int:
    require_count(size, name)
    if size == 0:
        raise InvalidArgumentError(f"{name} must be positive")
    return size
