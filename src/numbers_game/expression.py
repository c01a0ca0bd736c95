"""
Expression trees for the Countdown Numbers Game.

An expression is either a `Value` leaf holding one source number or an
`Application` of an operator to two sub-expressions. Trees are built
bottom-up and never mutated.
"""

from dataclasses import dataclass
from typing import Union

from .operators import Operator


@dataclass(frozen=True)
class Value:
    """A leaf holding one of the source numbers."""
    n: int

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class Application:
    """An operator applied to a left and a right sub-expression."""
    op: Operator
    left: "Expression"
    right: "Expression"

    def __str__(self) -> str:
        return f"{_bracket(self.left)}{self.op.symbol}{_bracket(self.right)}"


Expression = Union[Value, Application]


def _bracket(expr: Expression) -> str:
    if isinstance(expr, Value):
        return str(expr)
    return f"({expr})"


def render(expr: Expression) -> str:
    """Render an expression as infix text, e.g. `(1+2)*3`."""
    return str(expr)


@dataclass(frozen=True)
class Result:
    """An expression paired with its (already computed) value."""
    expr: Expression
    value: int

    def __str__(self) -> str:
        return f"{self.expr} = {self.value}"
