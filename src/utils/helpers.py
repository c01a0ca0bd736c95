from typing import Dict, List, Sequence

from numbers_game.analytics import ExpressionAnalyzer, SolutionStats
from numbers_game.expression import Expression, render
from numbers_game.operators import OPERATORS


def format_header(target: int, numbers: Sequence[int]) -> str:
    return f"Finding solutions for target {target} using numbers {list(numbers)}..."


def format_solutions(solutions: List[Expression], limit_reached: bool = False) -> str:
    """
    Format solutions one per line, or the "no solutions" message
    """
    if not solutions:
        return "No solutions found."

    noun = "solution" if len(solutions) == 1 else "solutions"
    heading = f"Found {len(solutions)} {noun}"
    if limit_reached:
        heading += " (limit reached)"
    lines = [f"{heading}:"]
    lines.extend(f"  {render(solution)}" for solution in solutions)
    return "\n".join(lines)


def format_analysis(analyzer: ExpressionAnalyzer) -> str:
    stats = analyzer.operator_stats
    lines = [
        "Expression Analysis:",
        f"- Total Solutions: {analyzer.total_solutions}",
        f"- Average Depth: {analyzer.average_depth:.2f}",
        f"- Max Depth: {analyzer.max_depth}",
        f"- Average Operations: {analyzer.average_operations:.2f}",
        f"- Max Operations: {analyzer.max_operations}",
        "Operator Statistics:",
    ]
    for op in OPERATORS:
        uses = stats.usage.get(op, 0)
        if not uses:
            continue
        lines.append(
            f"  {op}: {stats.share(op) * 100:.2f}% of operations "
            f"({uses} uses in {stats.solutions_using[op]} solutions)"
        )
    return "\n".join(lines)


def format_stats(stats: SolutionStats) -> str:
    """Multi-line block describing one solution"""
    return "\n".join([
        "Solution Statistics:",
        f"- Operations: {stats.operation_count}",
        f"- Expression Depth: {stats.depth}",
        f"- Operators Used: [{', '.join(stats.operator_symbols())}]",
        f"- Number Range: {stats.smallest_number} to {stats.largest_number}",
    ])


def format_check(expression: str, target: int, outcome: Dict) -> str:
    """Describe the outcome of ExpressionParser.parse_and_validate for an expression"""
    if not outcome['valid']:
        return f"{expression} is invalid: {outcome['error']}"

    distance = abs(target - outcome['result'])
    if distance == 0:
        return f"{expression} = {outcome['result']} (exact)"
    return f"{expression} = {outcome['result']} ({distance} away from {target})"
