from __future__ import annotations
from collections.abc import Sequence as _SequenceABC
from itertools import zip_longest
from ..types import *
from ..engine import view_of
from .search import contains
from .transform import uniq


def flatten(nested: Sequence[Any]) -> List[Any]:
    """
    every non-sequence leaf of an arbitrarily deep nesting of sequences,
    depth-first and left to right. strings, bytes and mappings count as leaves.
    """
    result = []
    # explicit stack keeps very deep nestings clear of the recursion limit
    stack = list(reversed(view_of(nested).values()))
    while stack:
        item = stack.pop()
        if isinstance(item, _SequenceABC) and not isinstance(item, (str, bytes, bytearray)):
            stack.extend(reversed(list(item)))
        else:
            result.append(item)
    return result


def zip(*sequences: Sequence[Any]) -> List[Tuple[Any, ...]]:
    """
    tuples of same-index elements. the result is as long as the longest input;
    shorter inputs contribute None past their end.
    ex: zip(['a', 'b'], [1]) -> [('a', 1), ('b', None)]
    """
    columns = [view_of(sequence).values() for sequence in sequences]
    if not columns:
        return []
    return list(zip_longest(*columns, fillvalue=None))


def intersection(*sequences: Sequence[Any]) -> List[Any]:
    """
    values of the first sequence present in every other one, each at most once,
    in first-sequence order.
    """
    if not sequences:
        return []
    first, others = sequences[0], sequences[1:]
    return [item for item in uniq(first)
            if all(contains(other, item) for other in others)]


def difference(sequence: Sequence[Any], *others: Sequence[Any]) -> List[Any]:
    """
    values of the first sequence not present in any of the others,
    keeping order and repeats. ex: difference([1, 2, 3, 4], [2, 4]) -> [1, 3]
    """
    return [item for item in view_of(sequence).values()
            if not any(contains(other, item) for other in others)]
