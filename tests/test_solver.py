"""End to end search behaviour."""

from collections import Counter

import pytest

from numbers_game.analytics import leaf_values
from numbers_game.evaluator import Computable, evaluate
from numbers_game import solver as solver_module
from numbers_game.expression import Application, Result, Value
from numbers_game.expression_parser import ExpressionParser
from numbers_game.operators import Operator
from numbers_game.solver import CountdownSolver, solutions

CLASSIC_NUMBERS = [1, 3, 7, 10, 25, 50]


@pytest.fixture(scope="module")
def classic_solutions():
    return list(solutions(CLASSIC_NUMBERS, 765))


def _walk(expr):
    yield expr
    if isinstance(expr, Application):
        yield from _walk(expr.left)
        yield from _walk(expr.right)


def test_classic_puzzle_has_solutions(classic_solutions):
    assert classic_solutions
    rendered = {str(e) for e in classic_solutions}
    assert "(25-10)*(1+50)" in rendered
    # 50+1 breaks the x <= y rule for addition
    assert "(25-10)*(50+1)" not in rendered


def test_classic_solutions_hit_target(classic_solutions):
    for expr in classic_solutions:
        assert evaluate(expr) == Computable(765)


def test_classic_solutions_use_available_numbers(classic_solutions):
    available = Counter(CLASSIC_NUMBERS)
    for expr in classic_solutions:
        used = Counter(leaf_values(expr))
        assert all(count <= available[n] for n, count in used.items())


def test_classic_solutions_respect_predicates(classic_solutions):
    for expr in classic_solutions:
        for node in _walk(expr):
            if isinstance(node, Application):
                x = evaluate(node.left)
                y = evaluate(node.right)
                assert node.op.valid(x.value, y.value)


def test_rendering_round_trip(classic_solutions):
    parser = ExpressionParser()
    for expr in classic_solutions:
        parsed = parser.to_expression(str(expr))
        assert parsed == expr
        assert parser.game_value(parsed) == 765


def test_commutative_duplicate_is_pruned():
    found = list(solutions([2, 3], 6))
    assert found == [Application(Operator.MUL, Value(2), Value(3))]
    assert [str(e) for e in found] == ["2*3"]


def test_single_number():
    assert list(solutions([5], 5)) == [Value(5)]
    assert list(solutions([5], 3)) == []


def test_unreachable_target():
    assert list(solutions([2, 4], 999)) == []


def test_idempotent():
    first = set(solutions([1, 2, 3, 4], 10))
    second = set(solutions([1, 2, 3, 4], 10))
    assert first
    assert first == second


def test_lazy_prefix():
    stream = solutions(CLASSIC_NUMBERS, 765)
    first = next(stream)
    assert evaluate(first) == Computable(765)


def test_solver_report():
    report = CountdownSolver().solve([1, 2, 3, 4], 10)
    assert report.found
    assert not report.limit_reached
    assert report.sequences_examined == 64
    assert set(report.solutions) == set(solutions([1, 2, 3, 4], 10))
    assert report.elapsed >= 0


def test_solver_limit():
    report = CountdownSolver().solve([1, 2, 3, 4], 10, limit=2)
    assert len(report.solutions) == 2
    assert report.limit_reached
    assert report.sequences_examined < 64


def test_solver_default_limit():
    report = CountdownSolver(limit=1).solve([1, 2, 3], 6)
    assert len(report.solutions) == 1


def test_solver_no_solution():
    report = CountdownSolver().solve([2, 4], 999)
    assert not report.found
    assert report.solutions == []


def test_solver_rejects_bad_limit():
    with pytest.raises(ValueError):
        CountdownSolver(limit=0)
    with pytest.raises(ValueError):
        CountdownSolver().solve([1, 2], 3, limit=-1)


def test_first():
    solver = CountdownSolver()
    assert solver.first([2, 3], 6) == Application(Operator.MUL, Value(2), Value(3))
    assert solver.first([2, 4], 999) is None


def test_limit_stops_inside_a_sequence(monkeypatch):
    """The limit is applied to the lazy stream, not per sequence."""
    pulled = []

    def fake_results(sequence):
        for _ in range(3):
            pulled.append(sequence)
            yield Result(Value(7), 7)

    monkeypatch.setattr(solver_module, 'results', fake_results)
    report = CountdownSolver().solve([7], 7, limit=1)
    assert report.solutions == [Value(7)]
    assert report.limit_reached
    assert report.sequences_examined == 1
    assert len(pulled) == 1
