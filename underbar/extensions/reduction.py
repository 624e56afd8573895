from __future__ import annotations
from ..types import *
from ..engine import view_of, adapt
from ..errors import EmptyReductionError


def reduce(collection: Collection[T], iterator: Reducer, accumulator: Any = MISSING) -> Any:
    """
    fold the collection's values left to right with iterator(accumulator, item).

    without a starting accumulator the first value seeds the fold and is never
    passed to the iterator as an item; with one, folding starts at the first value.
    mappings fold over their values. reducing an empty collection requires a seed.
    """
    values = view_of(collection).values()
    call = adapt(iterator, 2)

    if accumulator is MISSING:
        if not values:
            raise EmptyReductionError()
        result, remaining = values[0], values[1:]
    else:
        result, remaining = accumulator, values

    for item in remaining:
        result = call(result, item)
    return result


def every(collection: Collection[T], iterator: Optional[Predicate] = None) -> bool:
    """
    whether every value passes the truth test (the value itself when no test is given).
    every value is tested, even after the answer is known.
    """
    check = adapt(iterator, 1) if iterator is not None else bool

    def step(result, item):
        passed = bool(check(item))
        return result and passed

    return reduce(collection, step, True)


def some(collection: Collection[T], iterator: Optional[Predicate] = None) -> bool:
    """
    whether at least one value passes the truth test.
    each value is evaluated as a one-element every(), with no early exit.
    """
    def step(result, item):
        return True if every([item], iterator) else result

    return reduce(collection, step, False)
