from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..errors import require_callable, require_positive
from .. import config

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..dictionary import Dictionary


class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _groups(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        # defaultdict keeps insertion order, so keys come out in first-occurrence order
        groups = defaultdict(list)
        for item in self._enumerable._get_data():
            groups[key_selector(item)].append(item)
        return groups

    def group_by(self, key_selector: KeySelector[T, K]) -> 'Dictionary[K, Enumerable[T]]':
        """
        group elements by a key. each group keeps source order and keys appear in
        first-occurrence order. keys must be hashable.
        """
        from ..enumerable import Enumerable
        from ..dictionary import Dictionary
        require_callable(key_selector, "key_selector")
        groups = self._groups(key_selector)
        config.trace("group_by", len(self._enumerable), f"{len(groups)} group(s)")
        return Dictionary((key, Enumerable(items)) for key, items in groups.items())

    def group_by_with_aggregate(self, key_selector: KeySelector[T, K],
                                result_selector: Callable[[K, 'Enumerable[T]'], V]) -> 'Dictionary[K, V]':
        """group by key then reduce each group to a single value"""
        require_callable(result_selector, "result_selector")
        return self.group_by(key_selector).select(result_selector)

    def partition(self, predicate: Predicate[T]) -> Tuple['Enumerable[T]', 'Enumerable[T]']:
        """split into (matching, non-matching), both in source order"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        true_items, false_items = [], []
        for item in self._enumerable._get_data():
            (true_items if predicate(item) else false_items).append(item)
        config.trace("partition", len(self._enumerable), f"{len(true_items)}/{len(false_items)}")
        return Enumerable(true_items), Enumerable(false_items)

    def chunk(self, size: int) -> 'Enumerable[Enumerable[T]]':
        """split into chunks of specified size. the last chunk may be shorter."""
        from ..enumerable import Enumerable
        require_positive(size, "size")
        data = self._enumerable._get_data()
        result = Enumerable(Enumerable(data[i:i + size]) for i in range(0, len(data), size))
        config.trace("chunk", len(self._enumerable), len(result))
        return result

    def pairwise(self) -> 'Enumerable[Tuple[T, T]]':
        """return consecutive pairs"""
        from ..enumerable import Enumerable
        data = self._enumerable._get_data()
        result = Enumerable(zip(data, data[1:]))
        config.trace("pairwise", len(self._enumerable), len(result))
        return result
