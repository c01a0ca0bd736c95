"""
Solver for the Countdown Numbers Game.

Finds every expression over the source numbers that hits the target
exactly, by running the expression builder over every candidate sequence.
"""

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from .builder import results
from .choices import choices
from .expression import Expression

logger = logging.getLogger(__name__)


def solutions(numbers: Sequence[int], target: int) -> Iterator[Expression]:
    """
    Lazily yield every expression built from `numbers` whose value is `target`.

    Consumers may stop early; nothing needs to be cleaned up.
    """
    return matches(choices(numbers), target)


def matches(sequences: Iterable[Sequence[int]], target: int) -> Iterator[Expression]:
    """Lazily yield the expressions over each sequence whose value is `target`."""
    for sequence in sequences:
        for result in results(sequence):
            if result.value == target:
                yield result.expr


@dataclass
class SolveReport:
    """Outcome of one solver run."""
    target: int
    numbers: List[int]
    solutions: List[Expression] = field(default_factory=list)
    sequences_examined: int = 0
    elapsed: float = 0.0
    limit_reached: bool = False

    @property
    def found(self) -> bool:
        return bool(self.solutions)


class CountdownSolver:
    """
    Solver for the Countdown Numbers Game.
    Collects the solutions for a target and records how the search went.
    """

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: Default maximum number of solutions to collect, or None
                for an exhaustive search.
        """
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer")
        self.limit = limit

    def solve(self, numbers: Sequence[int], target: int,
              limit: Optional[int] = None) -> SolveReport:
        """
        Find the expressions that equal the target.

        Args:
            numbers: Available source numbers.
            target: The number to reach.
            limit: Stop after this many solutions (overrides the default).

        Returns:
            SolveReport with the solutions in search order.
        """
        limit = limit if limit is not None else self.limit
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer")

        report = SolveReport(target=target, numbers=list(numbers))
        started = time.perf_counter()

        def examined(sequences):
            for sequence in sequences:
                report.sequences_examined += 1
                yield sequence

        stream = matches(examined(choices(numbers)), target)
        report.solutions = list(itertools.islice(stream, limit))
        report.limit_reached = limit is not None and len(report.solutions) == limit

        report.elapsed = time.perf_counter() - started
        logger.info(
            "Target %d from %s: %d solution(s), %d sequence(s) in %.3fs%s",
            target, report.numbers, len(report.solutions),
            report.sequences_examined, report.elapsed,
            " (limit reached)" if report.limit_reached else "",
        )
        return report

    def first(self, numbers: Sequence[int], target: int) -> Optional[Expression]:
        """Return the first solution found, or None if there is none."""
        return next(solutions(numbers, target), None)
