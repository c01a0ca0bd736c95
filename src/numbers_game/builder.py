"""
Expression construction over an ordered number sequence.

`results` splits a sequence at every point into two non-empty contiguous
halves, solves each half recursively and joins every pair of sub-results
through each operator that accepts their values. Invalid combinations are
pruned before a node is ever created.
"""

from typing import Iterator, List, Sequence, Tuple

from .expression import Application, Result, Value
from .operators import OPERATORS


def combine(left: Result, right: Result) -> Iterator[Result]:
    """Yield every valid application of an operator to two results."""
    x, y = left.value, right.value
    for op in OPERATORS:
        if op.valid(x, y):
            yield Result(Application(op, left.expr, right.expr), op.apply(x, y))


def split(numbers: List[int]) -> Iterator[Tuple[List[int], List[int]]]:
    """Yield every (left, right) split into two non-empty contiguous parts."""
    for i in range(1, len(numbers)):
        yield numbers[:i], numbers[i:]


def results(numbers: Sequence[int]) -> Iterator[Result]:
    """
    Yield every (expression, value) result buildable from `numbers`,
    using each number exactly once and in the given order.
    """
    if not numbers:
        return
    if len(numbers) == 1:
        n = numbers[0]
        if n > 0:
            yield Result(Value(n), n)
        return

    for left_part, right_part in split(list(numbers)):
        lefts: List[Result] = list(results(left_part))
        if not lefts:
            continue
        rights: List[Result] = list(results(right_part))
        for lx in lefts:
            for ry in rights:
                yield from combine(lx, ry)
