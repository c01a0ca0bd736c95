# Countdown numbers game solver
from .analytics import ExpressionAnalyzer, OperatorStatistics, SolutionStats
from .builder import combine, results
from .choices import choices, interleave, perms, subs
from .evaluator import Computable, NotComputable, evaluate
from .exceptions import CountdownError, ExpressionError, InputValidationError
from .expression import Application, Expression, Result, Value, render
from .expression_parser import ExpressionParser
from .operators import OPERATORS, Operator
from .solver import CountdownSolver, SolveReport, solutions

__all__ = [
    'Application', 'Computable', 'CountdownError', 'CountdownSolver',
    'Expression', 'ExpressionAnalyzer', 'ExpressionError', 'ExpressionParser',
    'InputValidationError', 'NotComputable', 'OPERATORS', 'Operator',
    'OperatorStatistics', 'Result', 'SolutionStats', 'SolveReport', 'Value',
    'choices', 'combine', 'evaluate', 'interleave', 'perms', 'render',
    'results', 'solutions', 'subs',
]
