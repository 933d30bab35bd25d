from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, Sized
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
# (element, running aggregate) -> running aggregate
Accumulator = Callable[[T, U], U]

PairPredicate = Callable[[K, V], bool]
PairSelector = Callable[[K, V], U]


class _Nil:
    """the absent marker returned by the *_or_nil operators"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "NIL"

    def __reduce__(self):
        return (_Nil, ())


NIL = _Nil()


def is_nil(value: Any) -> bool:
    return value is NIL
