"""
Statistics over a completed solution set.

Everything here is a plain structural recursion over the expressions the
solver produced; nothing feeds back into the search.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List

from .expression import Application, Expression, Value
from .operators import OPERATORS, Operator


def count_operations(expr: Expression) -> int:
    """Number of operator applications in the tree."""
    if isinstance(expr, Value):
        return 0
    return 1 + count_operations(expr.left) + count_operations(expr.right)


def depth(expr: Expression) -> int:
    """Height of the tree; a single number has depth 0."""
    if isinstance(expr, Value):
        return 0
    return 1 + max(depth(expr.left), depth(expr.right))


def operators_used(expr: Expression) -> FrozenSet[Operator]:
    if isinstance(expr, Value):
        return frozenset()
    return frozenset({expr.op}) | operators_used(expr.left) | operators_used(expr.right)


def operator_counts(expr: Expression) -> Dict[Operator, int]:
    """How many times each operator appears in the tree."""
    counts: Dict[Operator, int] = {}
    stack: List[Expression] = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, Application):
            counts[node.op] = counts.get(node.op, 0) + 1
            stack.append(node.left)
            stack.append(node.right)
    return counts


def leaf_values(expr: Expression) -> List[int]:
    """Leaf numbers from left to right."""
    if isinstance(expr, Value):
        return [expr.n]
    return leaf_values(expr.left) + leaf_values(expr.right)


@dataclass(frozen=True)
class SolutionStats:
    """Shape of a single solution."""
    operation_count: int
    depth: int
    operators: FrozenSet[Operator]
    smallest_number: int
    largest_number: int

    @classmethod
    def from_expression(cls, expr: Expression) -> 'SolutionStats':
        numbers = leaf_values(expr)
        return cls(
            operation_count=count_operations(expr),
            depth=depth(expr),
            operators=operators_used(expr),
            smallest_number=min(numbers),
            largest_number=max(numbers),
        )

    def operator_symbols(self) -> List[str]:
        """Used operators in canonical order."""
        return [op.symbol for op in OPERATORS if op in self.operators]


@dataclass
class OperatorStatistics:
    """Operator usage accumulated over many solutions."""
    usage: Dict[Operator, int] = field(default_factory=dict)
    solutions_using: Dict[Operator, int] = field(default_factory=dict)
    total_operations: int = 0

    def add_expression(self, expr: Expression) -> None:
        counts = operator_counts(expr)
        for op, count in counts.items():
            self.usage[op] = self.usage.get(op, 0) + count
            self.solutions_using[op] = self.solutions_using.get(op, 0) + 1
            self.total_operations += count

    def share(self, op: Operator) -> float:
        """Fraction of all operations performed with `op`."""
        if not self.total_operations:
            return 0.0
        return self.usage.get(op, 0) / self.total_operations


class ExpressionAnalyzer:
    """
    Aggregate statistics over a solution set.

    Args:
        expressions: The solutions to analyse. Consumed once.
    """

    def __init__(self, expressions: Iterable[Expression]):
        self.expressions: List[Expression] = list(expressions)
        self.operator_stats = OperatorStatistics()
        self.average_depth = 0.0
        self.max_depth = 0
        self.average_operations = 0.0
        self.max_operations = 0
        self._analyze()

    def _analyze(self) -> None:
        if not self.expressions:
            return

        total_depth = 0
        total_ops = 0
        for expr in self.expressions:
            stats = SolutionStats.from_expression(expr)
            total_depth += stats.depth
            total_ops += stats.operation_count
            self.max_depth = max(self.max_depth, stats.depth)
            self.max_operations = max(self.max_operations, stats.operation_count)
            self.operator_stats.add_expression(expr)

        self.average_depth = total_depth / len(self.expressions)
        self.average_operations = total_ops / len(self.expressions)

    @property
    def total_solutions(self) -> int:
        return len(self.expressions)


def analyze_solutions(expressions: Iterable[Expression]) -> List[SolutionStats]:
    """Per-solution statistics, in the order given."""
    return [SolutionStats.from_expression(e) for e in expressions]
