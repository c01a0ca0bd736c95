"""
Arithmetic operators for the Countdown Numbers Game.

Each operator carries a validity predicate that doubles as the search's
pruning rule: besides rejecting negative and fractional results it keeps
only one ordering of commutative operands and drops multiplication or
division by one.
"""

import operator
from enum import Enum
from typing import Callable, Dict


class Operator(Enum):
    """The four binary operators, valued by their display symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    def valid(self, x: int, y: int) -> bool:
        """Check whether `x op y` is a legal, non-redundant step."""
        return _PREDICATES[self](x, y)

    def apply(self, x: int, y: int) -> int:
        """Apply the operator. Only meaningful when `valid(x, y)` holds."""
        return _FUNCTIONS[self](x, y)

    def __str__(self) -> str:
        return self.value


_PREDICATES: Dict[Operator, Callable[[int, int], bool]] = {
    Operator.ADD: lambda x, y: x <= y,
    Operator.SUB: lambda x, y: x > y,
    Operator.MUL: lambda x, y: x != 1 and y != 1 and x <= y,
    Operator.DIV: lambda x, y: y != 1 and x % y == 0,
}

_FUNCTIONS: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.floordiv,  # exact, guarded by the predicate
}

# Cached in declaration order
OPERATORS = tuple(Operator)
