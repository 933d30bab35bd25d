from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..errors import (
    EmptySequenceError, MultipleElementsError,
    require_callable, require_optional_callable, require_count
)
from .. import config

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..dictionary import Dictionary


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable._get_data())

    def tuple(self) -> Tuple[T, ...]:
        return self._enumerable._get_data()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable._get_data()))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._enumerable._get_data()))

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to a plain dict. later elements overwrite earlier ones on key collision."""
        require_callable(key_selector, "key_selector")
        require_optional_callable(value_selector, "value_selector")
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def dictionary(self, key_selector: KeySelector[T, K],
                   value_selector: Optional[Selector[T, V]] = None) -> 'Dictionary[K, V]':
        """convert to a queryable Dictionary. later elements overwrite earlier ones on key collision."""
        from ..dictionary import Dictionary
        result = Dictionary(self.dict(key_selector, value_selector))
        config.trace("to_dictionary", len(self._enumerable), len(result))
        return result

    # --- scans ---

    def _traced(self, operator: str, result: Any) -> Any:
        config.trace(operator, len(self._enumerable), result)
        return result

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        require_optional_callable(predicate, "predicate")
        if predicate is None: return self._traced("count", len(self._enumerable._get_data()))
        return self._traced("count", sum(1 for x in self._enumerable._get_data() if predicate(x)))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """true on the first element satisfying predicate. with no predicate, whether the sequence is non-empty."""
        require_optional_callable(predicate, "predicate")
        data = self._enumerable._get_data()
        if predicate is None: return self._traced("any", len(data) > 0)
        return self._traced("any", any(predicate(x) for x in data))

    def all(self, predicate: Predicate[T]) -> bool:
        """false on the first element failing predicate. vacuously true when empty."""
        require_callable(predicate, "predicate")
        return self._traced("all", all(predicate(x) for x in self._enumerable._get_data()))

    # --- element access ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        result = self.first_or_nil(predicate)
        if result is NIL:
            raise EmptySequenceError("sequence contains no elements" if predicate is None
                                     else "no element satisfies the condition")
        return result

    def first_or_nil(self, predicate: Optional[Predicate[T]] = None) -> Union[T, Any]:
        """first element (matching predicate, if given), or NIL. never raises for empty input."""
        require_optional_callable(predicate, "predicate")
        data = self._enumerable._get_data()
        if predicate is None:
            return self._traced("first_or_nil", data[0] if data else NIL)
        return self._traced("first_or_nil", next((item for item in data if predicate(item)), NIL))

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        result = self.first_or_nil(predicate)
        return default if result is NIL else result

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        result = self.last_or_nil(predicate)
        if result is NIL:
            raise EmptySequenceError("sequence contains no elements" if predicate is None
                                     else "no element satisfies the condition")
        return result

    def last_or_nil(self, predicate: Optional[Predicate[T]] = None) -> Union[T, Any]:
        """last element (matching predicate, if given), or NIL"""
        require_optional_callable(predicate, "predicate")
        data = self._enumerable._get_data()
        if predicate is None:
            return self._traced("last_or_nil", data[-1] if data else NIL)
        return self._traced("last_or_nil", next((item for item in reversed(data) if predicate(item)), NIL))

    def element_at_or_nil(self, index: int) -> Union[T, Any]:
        """element at a zero-based index, or NIL when out of range"""
        require_count(index, "index")
        data = self._enumerable._get_data()
        return self._traced("element_at_or_nil", data[index] if index < len(data) else NIL)

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        require_optional_callable(predicate, "predicate")
        data = [x for x in self._enumerable._get_data() if predicate(x)] if predicate else self._enumerable._get_data()
        if len(data) == 0: raise EmptySequenceError("sequence contains no matching elements")
        if len(data) > 1: raise MultipleElementsError("sequence contains more than one matching element")
        return self._traced("single", data[0])

    # --- folds ---

    def aggregate(self, accumulator: Accumulator[T, U], seed: Any = NIL) -> U:
        """
        left fold. without a seed the first element seeds the result and each
        following element e updates it as result = accumulator(e, result).
        """
        require_callable(accumulator, "accumulator")
        data = self._enumerable._get_data()
        if seed is NIL:
            if not data: raise EmptySequenceError("cannot aggregate empty sequence without seed")
            seed, data = data[0], data[1:]
        return self._traced("aggregate", reduce(lambda result, item: accumulator(item, result), data, seed))
