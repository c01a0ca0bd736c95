"""Evaluation of expression trees under the solver's validity rules."""

from dataclasses import dataclass
from typing import Union

from .expression import Application, Expression, Value


@dataclass(frozen=True)
class Computable:
    value: int


@dataclass(frozen=True)
class NotComputable:
    pass


Evaluation = Union[Computable, NotComputable]

NOT_COMPUTABLE = NotComputable()


def evaluate(expr: Expression) -> Evaluation:
    """
    Compute the value of an expression.

    A leaf is computable when its number is positive. An application is
    computable when both children are and its operator accepts their
    values; anything else is `NotComputable`.
    """
    if isinstance(expr, Value):
        return Computable(expr.n) if expr.n > 0 else NOT_COMPUTABLE

    if isinstance(expr, Application):
        left = evaluate(expr.left)
        right = evaluate(expr.right)
        if isinstance(left, NotComputable) or isinstance(right, NotComputable):
            return NOT_COMPUTABLE
        if not expr.op.valid(left.value, right.value):
            return NOT_COMPUTABLE
        return Computable(expr.op.apply(left.value, right.value))

    raise TypeError(f"Not an expression: {type(expr).__name__}")
