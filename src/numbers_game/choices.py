"""
Candidate number sequences for the search.

`choices` yields every ordering of every non-empty selection of the source
numbers. Selections are taken by position, so a number given twice may be
used twice, but never more often than it was given.
"""

from typing import Iterator, List, Optional, Sequence, Set, Tuple


def subs(numbers: Sequence[int]) -> Iterator[List[int]]:
    """
    Yield every sub-list of `numbers` (by position), including the empty one.

    Sub-lists preserve the original relative order.
    """
    if not numbers:
        yield []
        return
    head, tail = numbers[0], numbers[1:]
    for rest in subs(tail):
        yield rest
        yield [head] + rest


def interleave(x: int, numbers: Sequence[int]) -> Iterator[List[int]]:
    """Yield every list made by inserting `x` somewhere into `numbers`."""
    yield [x] + list(numbers)
    for i in range(1, len(numbers) + 1):
        yield list(numbers[:i]) + [x] + list(numbers[i:])


def perms(numbers: Sequence[int]) -> Iterator[List[int]]:
    """Yield every permutation of `numbers`; `perms([])` yields one empty list."""
    if not numbers:
        yield []
        return
    head, tail = numbers[0], numbers[1:]
    for p in perms(tail):
        yield from interleave(head, p)


def choices(numbers: Sequence[int]) -> Iterator[List[int]]:
    """
    Yield every permutation of every non-empty sub-list of `numbers`.

    With duplicate source values two different selections can produce the
    same sequence; each distinct sequence is emitted only once. Emitted
    sequences are only remembered when such repeats are possible.
    """
    numbers = list(numbers)
    seen: Optional[Set[Tuple[int, ...]]] = None
    if len(set(numbers)) < len(numbers):
        seen = set()

    for sub in subs(numbers):
        if not sub:
            continue
        for p in perms(sub):
            if seen is not None:
                key = tuple(p)
                if key in seen:
                    continue
                seen.add(key)
            yield p


def count_choices(n: int) -> int:
    """Number of sequences `choices` yields for `n` distinct numbers."""
    total = 0
    arrangements = 1
    for k in range(1, n + 1):
        # n! / (n - k)!
        arrangements *= n - k + 1
        total += arrangements
    return total
