from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *
from ..errors import InvalidArgumentError, require_callable, require_optional_callable, require_count
from .. import config

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def _distinct_by(data: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> List[T]:
    """first-seen elements by value equality of the element or its key. unhashable keys fall back to a linear scan."""
    seen = set()
    seen_unhashable = []
    result = []
    for item in data:
        key = item if key_selector is None else key_selector(item)
        try:
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            if key in seen_unhashable:
                continue
            seen_unhashable.append(key)
        result.append(item)
    return result


def _is_type_filter(type_filter: Any) -> bool:
    if isinstance(type_filter, type):
        return True
    return isinstance(type_filter, tuple) and bool(type_filter) and all(isinstance(t, type) for t in type_filter)


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        data = self._get_data()
        result = Enumerable(x for x in data if predicate(x))
        config.trace("where", len(data), len(result))
        return result

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        data = self._get_data()
        result = Enumerable(selector(x) for x in data)
        config.trace("select", len(data), len(result))
        return result

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten exactly one level"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        data = self._get_data()
        result = Enumerable(item for x in data for item in selector(x))
        config.trace("select_many", len(data), len(result))
        return result

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        result = Enumerable(selector(item, index) for index, item in enumerate(self._get_data()))
        config.trace("select_with_index", len(self), len(result))
        return result

    def sort(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'OrderedEnumerable[T]':
        """stable ascending sort by natural order, or by key_selector when given"""
        from ..enumerable import OrderedEnumerable
        require_optional_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data(), [(key_selector, False)])

    def sort_descending(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'OrderedEnumerable[T]':
        """stable descending sort. equal elements keep their source order."""
        from ..enumerable import OrderedEnumerable
        require_optional_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data(), [(key_selector, True)])

    def of_type(self: 'Enumerable[T]', type_filter: Union[Type[U], Tuple[Type, ...]]) -> 'Enumerable[U]':
        """
        filters the elements of a sequence based on a runtime isinstance check.
        note that bool is a subclass of int, so of_type(int) keeps True/False.
        """
        if not _is_type_filter(type_filter):
            raise InvalidArgumentError(f"of_type expects a type or tuple of types, got {type_filter!r}")
        return self.where(lambda item: isinstance(item, type_filter))

    def distinct(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        require_optional_callable(key_selector, "key_selector")
        data = self._get_data()
        result = Enumerable(_distinct_by(data, key_selector))
        config.trace("distinct", len(data), len(result))
        return result

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        require_count(count)
        result = Enumerable(self._get_data()[:count])
        config.trace("take", len(self), len(result))
        return result

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        require_count(count)
        result = Enumerable(self._get_data()[count:])
        config.trace("skip", len(self), len(result))
        return result

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        result = Enumerable(takewhile(predicate, self._get_data()))
        config.trace("take_while", len(self), len(result))
        return result

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        result = Enumerable(dropwhile(predicate, self._get_data()))
        config.trace("skip_while", len(self), len(result))
        return result

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        if other is None:
            raise InvalidArgumentError("concat requires a sequence to append")
        result = Enumerable(chain(self._get_data(), other))
        config.trace("concat", len(self), len(result))
        return result

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        result = Enumerable(reversed(self._get_data()))
        config.trace("reverse", len(self), len(result))
        return result

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        result = Enumerable(chain(self._get_data(), [element]))
        config.trace("append", len(self), len(result))
        return result

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        result = Enumerable(chain([element], self._get_data()))
        config.trace("prepend", len(self), len(result))
        return result

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        data = self._get_data()
        result = Enumerable(data if data else [default_value])
        config.trace("default_if_empty", len(self), len(result))
        return result
