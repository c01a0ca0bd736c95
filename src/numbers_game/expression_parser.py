"""
Safe infix expression parser for the Countdown Numbers Game.
Uses Python's ast module to parse expressions without eval().
"""

import ast
import operator
import re
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .exceptions import ExpressionError
from .expression import Application, Expression, Value
from .operators import Operator


class ExpressionParser:
    """
    Parses and evaluates infix expressions under the game rules.
    Only allows: +, -, *, / operators, positive integers, and parentheses.
    Every intermediate result must be a positive integer.
    """

    # Mapping of AST operators to the game's operators
    AST_OPERATORS = {
        ast.Add: Operator.ADD,
        ast.Sub: Operator.SUB,
        ast.Mult: Operator.MUL,
        ast.Div: Operator.DIV,
    }

    ARITHMETIC = {
        Operator.ADD: operator.add,
        Operator.SUB: operator.sub,
        Operator.MUL: operator.mul,
        Operator.DIV: operator.floordiv,
    }

    # Characters allowed in expressions
    ALLOWED_CHARS = set('0123456789+-*/() ')

    # Longest integer literal accepted
    MAX_DIGITS = 100

    def sanitize(self, expression: str) -> str:
        """
        Normalise operator spellings.

        Raises:
            ExpressionError: If any other character is not allowed
        """
        expression = expression.replace('×', '*').replace('÷', '/').replace('x', '*')
        invalid = sorted({c for c in expression if c not in self.ALLOWED_CHARS})
        if invalid:
            raise ExpressionError(f"Invalid character(s) in expression: {' '.join(invalid)}")
        return expression

    def extract_numbers(self, expression: str) -> List[int]:
        """Return every integer literal in the expression, in order."""
        literals = re.findall(r'\d+', expression)
        if any(len(n) > self.MAX_DIGITS for n in literals):
            raise ExpressionError("Number too large")
        return [int(n) for n in literals]

    def validate_numbers(self, expression: str, available: List[int]) -> Tuple[bool, Optional[str]]:
        """
        Check if expression only uses available numbers (each once max).

        Returns:
            Tuple of (is_valid, error_message or None)
        """
        try:
            used_counter = Counter(self.extract_numbers(expression))
        except ExpressionError as e:
            return False, str(e)
        available_counter = Counter(available)

        for num, count in used_counter.items():
            if num not in available_counter:
                return False, f"Number {num} is not available"
            if count > available_counter[num]:
                return False, f"Number {num} used more times than available"

        return True, None

    def _parse(self, expression: str) -> ast.AST:
        clean_expr = self.sanitize(expression).strip()
        if not clean_expr:
            raise ExpressionError("Empty expression")
        try:
            return ast.parse(clean_expr, mode='eval').body
        except SyntaxError as e:
            raise ExpressionError(f"Invalid syntax: {e.msg}") from e
        except ValueError as e:
            raise ExpressionError(str(e)) from e

    def _build(self, node: ast.AST) -> Expression:
        """Convert an AST node into an expression tree."""
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or not isinstance(node.value, int):
                raise ExpressionError("Only integer numbers are allowed")
            if node.value <= 0:
                raise ExpressionError("Numbers must be positive integers")
            return Value(node.value)

        if isinstance(node, ast.BinOp):
            op = self.AST_OPERATORS.get(type(node.op))
            if op is None:
                raise ExpressionError(f"Operator not allowed: {type(node.op).__name__}")
            return Application(op, self._build(node.left), self._build(node.right))

        if isinstance(node, ast.UnaryOp):
            raise ExpressionError("Unary operators not allowed")

        raise ExpressionError("Invalid expression structure")

    def to_expression(self, expression: str) -> Expression:
        """
        Parse infix text into an expression tree.

        Raises:
            ExpressionError: If the text is not a well-formed expression
        """
        return self._build(self._parse(expression))

    def game_value(self, expr: Expression) -> int:
        """
        Evaluate a tree under the game rules.

        Unlike the solver's pruning rules any operand order is accepted,
        but every step must still produce a positive integer.

        Raises:
            ExpressionError: On a non-positive or fractional intermediate
        """
        if isinstance(expr, Value):
            return expr.n

        left = self.game_value(expr.left)
        right = self.game_value(expr.right)
        if expr.op is Operator.DIV and left % right != 0:
            raise ExpressionError(f"{left} / {right} is not a whole number")
        result = self.ARITHMETIC[expr.op](left, right)
        if result <= 0:
            raise ExpressionError("Intermediate result must be a positive integer")
        return result

    def evaluate(self, expression: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Safely evaluate expression text.

        Returns:
            Tuple of (success, result or None, error_message or None)
        """
        try:
            return True, self.game_value(self.to_expression(expression)), None
        except ExpressionError as e:
            return False, None, str(e)

    def parse_and_validate(self, expression: str, available_numbers: List[int]) -> Dict:
        """
        Complete validation and evaluation of an expression.

        Returns:
            Dictionary with:
            - valid: bool
            - result: int or None
            - error: str or None
            - numbers_used: list of numbers used
        """
        result = {
            'valid': False,
            'result': None,
            'error': None,
            'numbers_used': []
        }

        try:
            clean_expr = self.sanitize(expression)
            if not clean_expr.strip():
                raise ExpressionError("Empty expression")
            result['numbers_used'] = self.extract_numbers(clean_expr)
        except ExpressionError as e:
            result['error'] = str(e)
            return result

        is_valid, error = self.validate_numbers(clean_expr, available_numbers)
        if not is_valid:
            result['error'] = error
            return result

        success, value, error = self.evaluate(clean_expr)
        if not success:
            result['error'] = error
            return result

        result['valid'] = True
        result['result'] = value
        return result
