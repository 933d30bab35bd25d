from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..errors import EmptySequenceError, require_optional_callable
from .. import config

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]


class StatsAccessor(Generic[T]):
    """simple numeric aggregation. anything beyond sum/average/min/max belongs in numpy or pandas."""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None, numeric: bool = True) -> List[Any]:
        """helper to extract values for aggregation, optionally checking they are numeric."""
        require_optional_callable(selector, "selector")
        data = self._enumerable._get_data()
        values = [selector(x) for x in data] if selector else list(data)
        if numeric and not all(isinstance(x, (int, float)) for x in values):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return values

    def _traced(self, operator: str, result: Any) -> Any:
        config.trace(operator, len(self._enumerable), result)
        return result

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum. the sum of an empty sequence is 0."""
        values = self._get_values(selector)
        if not values: return self._traced("sum", 0)
        if all(isinstance(x, int) for x in values):
            # python ints are unbounded, int64 would wrap
            return self._traced("sum", sum(values))
        result = np.sum(values)
        return self._traced("sum", result.item() if hasattr(result, "item") else result)

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average"""
        values = self._get_values(selector)
        if not values: raise EmptySequenceError("cannot calculate average of empty sequence")
        return self._traced("average", float(np.mean(values)))

    def min(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """smallest element, or smallest selector result"""
        values = self._get_values(selector, numeric=False)
        if not values: raise EmptySequenceError("cannot calculate min of empty sequence")
        return self._traced("min", min(values))

    def max(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """largest element, or largest selector result"""
        values = self._get_values(selector, numeric=False)
        if not values: raise EmptySequenceError("cannot calculate max of empty sequence")
        return self._traced("max", max(values))
