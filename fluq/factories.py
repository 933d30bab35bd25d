import typing
from .types import *
from .errors import require_callable, require_count

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable
    from .dictionary import Dictionary

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. the data is copied immediately."""
    from .enumerable import Enumerable
    return Enumerable(data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of count consecutive integers"""
    from .enumerable import Enumerable
    require_count(count)
    return Enumerable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    require_count(count)
    return Enumerable([item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable()

def generate(generator_func: Callable[[], T], count: int) -> 'Enumerable[T]':
    """generate sequence using a function"""
    from .enumerable import Enumerable
    require_callable(generator_func, "generator_func")
    require_count(count)
    return Enumerable(generator_func() for _ in range(count))

def from_dict(data: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> 'Dictionary[K, V]':
    """create a queryable dictionary from a mapping or (key, value) pairs"""
    from .dictionary import Dictionary
    return Dictionary(data)

# --- aliases ---
fluq = from_iterable
P = from_iterable
D = from_dict
