from __future__ import annotations

import pandas as pd
from .types import *
from .errors import InvalidArgumentError, require_callable, require_optional_callable
from . import config


class Dictionary(Mapping[K, V]):
    """
    a read-only, insertion-ordered mapping with query operators over its
    (key, value) pairs. filters and scans run through the sequence engine
    on the pair sequence, so they share its short-circuit and error rules.
    """

    def __init__(self, source: Union[Mapping[K, V], Iterable[Tuple[K, V]]] = ()):
        # dict() keeps the last value for a repeated key
        self._data: Dict[K, V] = dict(source)

    # --- mapping protocol ---

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Dictionary({self._data!r})"

    # --- sequence views ---

    def pairs(self) -> 'Enumerable[Tuple[K, V]]':
        """the (key, value) pairs as a sequence, in enumeration order"""
        from .enumerable import Enumerable
        return Enumerable(self._data.items())

    def keys_seq(self) -> 'Enumerable[K]':
        from .enumerable import Enumerable
        return Enumerable(self._data.keys())

    def values_seq(self) -> 'Enumerable[V]':
        from .enumerable import Enumerable
        return Enumerable(self._data.values())

    # --- operators ---

    def _traced(self, operator: str, result: Any) -> Any:
        config.trace(f"dictionary.{operator}", len(self), len(result) if isinstance(result, Sized) else result)
        return result

    def where(self, predicate: PairPredicate[K, V]) -> 'Dictionary[K, V]':
        """keep pairs for which predicate(key, value) is true"""
        require_callable(predicate, "predicate")
        return self._traced("where", Dictionary(self.pairs().where(lambda pair: predicate(*pair))))

    def select(self, selector: PairSelector[K, V, U]) -> 'Dictionary[K, U]':
        """same keys, each value replaced by selector(key, value)"""
        require_callable(selector, "selector")
        return self._traced("select", Dictionary((key, selector(key, value)) for key, value in self._data.items()))

    def to_array(self, selector: Optional[PairSelector[K, V, U]] = None) -> 'Enumerable[U]':
        """selector(key, value) for every pair, in enumeration order. defaults to (key, value) tuples."""
        require_optional_callable(selector, "selector")
        if selector is None:
            return self._traced("to_array", self.pairs())
        return self._traced("to_array", self.pairs().select(lambda pair: selector(*pair)))

    def any(self, predicate: Optional[PairPredicate[K, V]] = None) -> bool:
        """short-circuits on the first matching pair. false when empty."""
        require_optional_callable(predicate, "predicate")
        if predicate is None:
            return self._traced("any", len(self._data) > 0)
        return self._traced("any", self.pairs().to.any(lambda pair: predicate(*pair)))

    def all(self, predicate: PairPredicate[K, V]) -> bool:
        """short-circuits on the first failing pair. true when empty."""
        require_callable(predicate, "predicate")
        return self._traced("all", self.pairs().to.all(lambda pair: predicate(*pair)))

    def count(self, predicate: Optional[PairPredicate[K, V]] = None) -> int:
        require_optional_callable(predicate, "predicate")
        if predicate is None:
            return self._traced("count", len(self._data))
        return self._traced("count", self.pairs().to.count(lambda pair: predicate(*pair)))

    def merge(self, other: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> 'Dictionary[K, V]':
        """all pairs of both. on a key collision the value from other wins."""
        if other is None:
            raise InvalidArgumentError("merge requires a mapping to merge with")
        merged = dict(self._data)
        merged.update(other)
        return self._traced("merge", Dictionary(merged))

    # --- conversions ---

    def to_dict(self) -> Dict[K, V]:
        """a new plain dict"""
        return dict(self._data)

    def to_series(self) -> pd.Series:
        """convert to a pandas series indexed by key"""
        return pd.Series(dict(self._data))
