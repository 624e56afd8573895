from __future__ import annotations
from ..types import *
from ..engine import each, adapt
from .search import index_of


def filter(collection: Collection[T], test: Predicate) -> List[T]:
    """values for which test(value, key) is truthy, in encounter order"""
    check = adapt(test, 2)
    result = []

    def visit(item, key):
        if check(item, key):
            result.append(item)

    each(collection, visit)
    return result


def reject(collection: Collection[T], test: Predicate) -> List[T]:
    """the complement of filter(): values for which the test is falsy"""
    check = adapt(test, 2)
    return filter(collection, lambda item, key: not check(item, key))


def uniq(sequence: Sequence[T]) -> List[T]:
    """first occurrence of every distinct value, in first-occurrence order"""
    result = []

    def visit(item):
        if index_of(result, item) == -1:
            result.append(item)

    each(sequence, visit)
    return result


def map(collection: Collection[T], iterator: Iteratee) -> List[U]:
    """iterator(value, key) for every element, in encounter order"""
    call = adapt(iterator, 2)
    result = []
    each(collection, lambda item, key: result.append(call(item, key)))
    return result


def pluck(collection: Collection[Any], key: Any) -> List[Any]:
    """the value stored under `key` in every record"""
    from .misc import property_of
    return map(collection, lambda item: property_of(item, key))
