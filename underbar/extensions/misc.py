from __future__ import annotations
import numpy as np
from collections.abc import Mapping as _MappingABC
from ..types import *
from ..engine import each, view_of, adapt
from .transform import map


def identity(value: T) -> T:
    return value


def first(sequence: Sequence[T], n: Any = MISSING) -> Union[Optional[T], List[T]]:
    """the first element (None when empty), or a new list of the first n"""
    values = view_of(sequence).values()
    if n is MISSING:
        return values[0] if values else None
    return values[:n]


def last(sequence: Sequence[T], n: Any = MISSING) -> Union[Optional[T], List[T]]:
    """the last element (None when empty), or a new list of the last n"""
    values = view_of(sequence).values()
    if n is MISSING:
        return values[-1] if values else None
    if n > len(values):
        return values
    # slicing from len - n keeps n == 0 empty and a negative n empty
    return values[len(values) - n:]


def extend(target: MutableMapping[K, V], *sources: Mapping[K, V]) -> MutableMapping[K, V]:
    """copy every key of every source onto target, later sources winning"""
    def assign(value, key):
        target[key] = value

    for source in sources:
        each(source, assign)
    return target


def defaults(target: MutableMapping[K, V], *sources: Mapping[K, V]) -> MutableMapping[K, V]:
    """fill keys missing from target; the earliest source to supply a key wins"""
    def fill(value, key):
        if key not in target:
            target[key] = value

    for source in sources:
        each(source, fill)
    return target


def invoke(collection: Collection[Any], function_or_key: Union[str, Callable[..., U]],
           args: Optional[Iterable[Any]] = None) -> List[U]:
    """
    call a method on every element: the method named by a string, or a function
    receiving the element as its first argument (its `self`). missing methods raise.
    """
    extra = tuple(args) if args is not None else ()
    if isinstance(function_or_key, str):
        return map(collection, lambda item: getattr(item, function_or_key)(*extra))
    return map(collection, lambda item: function_or_key(item, *extra))


def shuffle(sequence: Sequence[T], random_state: Optional[int] = None) -> List[T]:
    """a new list holding every element once, in uniformly random order"""
    if random_state is None:
        from ..config import get_config
        random_state = get_config().random_state
    values = view_of(sequence).values()
    rng = np.random.default_rng(random_state)
    return [values[i] for i in rng.permutation(len(values))]


def sort_by(collection: Collection[T], iterator: Union[str, Iteratee]) -> List[T]:
    """
    the collection's values sorted ascending by a criterion, either
    iterator(value, key, collection) or a property name. the sort is stable,
    and values whose criterion is None go last.
    """
    view = view_of(collection)
    entries = list(view.entries())
    if isinstance(iterator, str):
        criterion = lambda value, key, source: property_of(value, iterator)
    else:
        criterion = adapt(iterator, 3)
    keys = [criterion(value, key, view.collection) for key, value in entries]

    order = _try_numpy_argsort(keys)
    if order is None:
        order = sorted(range(len(entries)), key=lambda i: (keys[i] is None, keys[i]))
    return [entries[i][1] for i in order]


def property_of(item: Any, key: Any) -> Any:
    """item[key] for mappings and non-string keys, otherwise attribute lookup"""
    if isinstance(item, _MappingABC) or not isinstance(key, str):
        return item[key]
    return getattr(item, key)


_EXACT_FLOAT_INT = 2 ** 53


def _is_plain_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        # beyond 2**53 float64 would merge neighbouring ints
        return abs(int(value)) <= _EXACT_FLOAT_INT
    return isinstance(value, (float, np.floating))


def _try_numpy_argsort(keys: List[Any]) -> Optional[List[int]]:
    """stable argsort when every criterion is a plain real number"""
    if not keys or not all(_is_plain_number(k) for k in keys):
        return None
    try:
        return np.argsort(np.asarray(keys, dtype=float), kind='stable').tolist()
    except (TypeError, ValueError, OverflowError):
        return None
