from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from . import config
from .errors import require_callable

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Tuple[T, ...]:
        """get the underlying data as an immutable tuple"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data: Iterable[T] = ()):
        """snapshot the source eagerly. later changes to the source are not observed."""
        self._data: Tuple[T, ...] = tuple(data)

    def _get_data(self) -> Tuple[T, ...]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, _BaseEnumerable):
            return self._get_data() == other._get_data()
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        data = self._get_data()
        preview = ", ".join(repr(x) for x in data[:10])
        if len(data) > 10:
            preview += ", ..."
        return f"{type(self).__name__}([{preview}])"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """an eager, linq-inspired sequence. every operator returns a new enumerable or a scalar."""
    def __init__(self, data: Iterable[T] = ()):
        super().__init__(data)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    a sorted sequence that remembers its pre-sort data and sort keys,
    so then_by can re-sort with additional keys.
    """

    def __init__(self, source: Iterable[T], sort_keys: List[Tuple[Optional[Callable], bool]]):
        self._source: Tuple[T, ...] = tuple(source)
        self._sort_keys = sort_keys
        super().__init__(self._apply_sort(self._source, sort_keys))
        config.trace("sort", len(self._source), f"{len(sort_keys)} key(s)")

    @staticmethod
    def _apply_sort(data: Tuple[T, ...], sort_keys: List[Tuple[Optional[Callable], bool]]) -> List[T]:
        # python's sort is stable (reverse=True included), so sort from the last key to the first
        result = list(data)
        for key_selector, is_descending in reversed(sort_keys):
            result.sort(key=key_selector, reverse=is_descending)
        return result

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, True)])
