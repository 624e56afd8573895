from typing import (
    TypeVar, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, MutableMapping, Sequence, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[int, Hashable]
Visitor = Callable[..., Any]
Predicate = Callable[..., bool]
Iteratee = Callable[..., U]
Reducer = Callable[[U, T], U]
Collection = Union[Sequence[T], Mapping[Any, T]]
TimerHandle = Any


class _Missing:
    """marks an argument the caller did not pass, so None stays a usable value"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()
