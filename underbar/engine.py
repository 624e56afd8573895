from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping as _MappingABC, Sequence as _SequenceABC
from .types import *
from .errors import UnsupportedCollectionError

# --- abstract base class ---

class CollectionView(ABC):
    """uniform read-only view over one of the two supported container shapes"""

    def __init__(self, collection):
        self.collection = collection

    @abstractmethod
    def entries(self) -> Iterator[Tuple[Key, Any]]:
        """yield (key, value) pairs in the container's own order"""
        pass

    def values(self) -> List[Any]:
        """materialize the values in enumeration order"""
        return [value for _, value in self.entries()]

    def __len__(self) -> int:
        return len(self.collection)

# --- the two shapes ---

class IndexedView(CollectionView):
    def entries(self) -> Iterator[Tuple[int, Any]]:
        # length is read once up front, like a classic for loop over an array
        collection = self.collection
        for index in range(len(collection)):
            yield index, collection[index]


class KeyedView(CollectionView):
    def entries(self) -> Iterator[Tuple[Hashable, Any]]:
        collection = self.collection
        for key in list(collection):
            yield key, collection[key]


def view_of(collection: Any) -> CollectionView:
    """the single place where container shape is decided"""
    if isinstance(collection, CollectionView):
        return collection
    if isinstance(collection, _MappingABC):
        return KeyedView(collection)
    if isinstance(collection, _SequenceABC):
        return IndexedView(collection)
    raise UnsupportedCollectionError(collection)


# --- visitor adaptation ---

def accepted_positional(func: Callable[..., Any], offered: int) -> int:
    """
    how many of `offered` positional arguments func can take.
    parameters with defaults are left alone, so `lambda x, n=n: ...` keeps its n.
    """
    if inspect.isclass(func):
        # constructors like int or str take extra positionals with other meanings
        return 1
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get just the value
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return offered
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD) \
                and param.default is param.empty:
            count += 1
    return min(count, offered)


def adapt(func: Callable[..., U], offered: int = 3) -> Callable[..., U]:
    """
    wrap func so it can always be called with `offered` positional arguments,
    silently dropping the trailing ones its signature does not accept.
    """
    wanted = accepted_positional(func, offered)
    if wanted >= offered:
        return func
    if wanted == 0:
        return lambda *args: func()
    return lambda *args: func(*args[:wanted])

# --- equality ---

_SCALAR_TYPES = (int, float, complex, str, bytes, bool, type(None))


def strict_equal(a: Any, b: Any) -> bool:
    """
    equality without coercion: 1, 1.0 and True are all different values.
    scalars of the same type compare by value, everything else by identity.
    """
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, _SCALAR_TYPES):
        return False
    return a == b

# --- the iteration primitive ---

def each(collection: Collection[T], visitor: Visitor) -> None:
    """
    call visitor(value, key, collection) for every element.
    sequences are visited in index order, mappings in their own key order.
    visitors may declare fewer parameters; extra arguments are dropped.
    raises UnsupportedCollectionError for anything that is neither shape.
    """
    view = view_of(collection)
    call = adapt(visitor, 3)
    source = view.collection
    for key, value in view.entries():
        call(value, key, source)
