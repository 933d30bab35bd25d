from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..errors import InvalidArgumentError
from .core import _distinct_by
from .. import config

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _require_other(other: Any, operation: str) -> None:
    if other is None:
        raise InvalidArgumentError(f"{operation} requires a second sequence")


class SetAccessor(Generic[T]):
    """
    order-preserving set operations. membership uses value equality,
    the same rule as distinct(), so unhashable elements are allowed.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """distinct elements of both sequences, first sequence first."""
        from ..enumerable import Enumerable
        _require_other(other, "union")
        result = Enumerable(_distinct_by(chain(self._enumerable._get_data(), other)))
        config.trace("union", len(self._enumerable), len(result))
        return result

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """distinct elements present in both sequences, in first-sequence order."""
        from ..enumerable import Enumerable
        _require_other(other, "intersect")
        other_data = list(other)
        result = Enumerable(x for x in _distinct_by(self._enumerable._get_data()) if x in other_data)
        config.trace("intersect", len(self._enumerable), len(result))
        return result

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """distinct elements of the first sequence not present in the second."""
        from ..enumerable import Enumerable
        _require_other(other, "except_")
        other_data = list(other)
        result = Enumerable(x for x in _distinct_by(self._enumerable._get_data()) if x not in other_data)
        config.trace("except_", len(self._enumerable), len(result))
        return result
