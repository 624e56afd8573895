from __future__ import annotations
from ..types import *
from ..engine import each, view_of, strict_equal, KeyedView
from .reduction import reduce


def index_of(sequence: Sequence[T], target: Any) -> int:
    """index of the first element strictly equal to target, or -1"""
    result = -1

    def visit(item, index):
        nonlocal result
        if result == -1 and strict_equal(item, target):
            result = index

    each(sequence, visit)
    return result


def contains(collection: Collection[T], target: Any) -> bool:
    """
    whether any value of the collection is strictly equal to target.
    mappings are searched by value, never by key.
    """
    view = view_of(collection)
    if isinstance(view, KeyedView):
        for _, value in view.entries():
            if strict_equal(value, target):
                return True
        return False

    return reduce(view, lambda was_found, item: was_found or strict_equal(item, target), False)
