import pytest

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Arity, Category, Operation
from arithmego.game.question import Question
from arithmego.operations.helpers import (
    best_question,
    clamp_score,
    count_borrows,
    count_carries,
    count_digits,
    count_zeros_crossed,
    crosses_boundary,
    distance_from_range,
    factorial,
    int_pow,
    is_nice_number,
    is_round_number,
    is_times_table_fact,
    power_of_10_above,
    random_in_range,
)


@pytest.mark.parametrize(
    "n, expect",
    [(0, 1), (1, 1), (9, 1), (10, 2), (99, 2), (100, 3), (999, 3), (1000, 4), (-5, 1), (-99, 2), (-100, 3)],
)
def test_count_digits(n, expect):
    assert count_digits(n) == expect


@pytest.mark.parametrize(
    "a, b, expect",
    [(3, 5, 0), (7, 8, 1), (23, 14, 0), (47, 35, 1), (99, 1, 2), (789, 456, 3), (999, 999, 3)],
)
def test_count_carries(a, b, expect):
    assert count_carries(a, b) == expect


@pytest.mark.parametrize(
    "a, b, expect",
    [(8, 3, 0), (15, 7, 1), (58, 23, 0), (52, 37, 1), (100, 1, 2), (1000, 456, 3)],
)
def test_count_borrows(a, b, expect):
    assert count_borrows(a, b) == expect


def test_count_borrows_is_order_independent():
    assert count_borrows(456, 1000) == count_borrows(1000, 456)


@pytest.mark.parametrize("a, expect", [(0, 0), (-10, 0), (1000, 3), (1234, 0), (1050, 2)])
def test_count_zeros_crossed(a, expect):
    assert count_zeros_crossed(a) == expect


@pytest.mark.parametrize(
    "n, expect",
    [
        (0, True), (5, True), (10, True), (15, True), (20, True), (25, True),
        (50, True), (100, True), (7, False), (13, False), (37, False), (105, False),
    ],
)
def test_is_nice_number(n, expect):
    assert is_nice_number(n) is expect


@pytest.mark.parametrize(
    "n, expect",
    [(0, True), (10, True), (20, True), (100, True), (5, False), (15, False), (99, False)],
)
def test_is_round_number(n, expect):
    assert is_round_number(n) is expect


def test_power_of_10_above():
    assert power_of_10_above(0) == 10
    assert power_of_10_above(9) == 10
    assert power_of_10_above(10) == 100
    assert power_of_10_above(999) == 1000


def test_crosses_boundary():
    assert crosses_boundary(95, 10, 105) is True
    assert crosses_boundary(40, 10, 50) is False
    assert crosses_boundary(0, 10, 10) is False


@pytest.mark.parametrize("score, expect", [(0.5, 1.0), (1.0, 1.0), (5.0, 5.0), (10.0, 10.0), (15.0, 10.0)])
def test_clamp_score(score, expect):
    assert clamp_score(score) == expect


@pytest.mark.parametrize(
    "score, low, high, expect",
    [(3.0, 2.0, 4.0, 0.0), (2.0, 2.0, 4.0, 0.0), (4.0, 2.0, 4.0, 0.0), (1.0, 2.0, 4.0, 1.0), (5.0, 2.0, 4.0, 1.0)],
)
def test_distance_from_range(score, low, high, expect):
    assert distance_from_range(score, low, high) == expect


def test_random_in_range_bounds():
    for _ in range(200):
        assert 3 <= random_in_range(3, 7) <= 7
        assert 3 <= random_in_range(7, 3) <= 7
    assert random_in_range(4, 4) == 4


def test_is_times_table_fact():
    assert is_times_table_fact(12, 12) is True
    assert is_times_table_fact(13, 2) is False
    assert is_times_table_fact(2, 13) is False


@pytest.mark.parametrize(
    "base, exp, expect",
    [(2, 0, 1), (2, 1, 2), (2, 2, 4), (2, 3, 8), (2, 10, 1024), (3, 3, 27), (10, 3, 1000), (2, -1, 0)],
)
def test_int_pow(base, exp, expect):
    assert int_pow(base, exp) == expect


@pytest.mark.parametrize(
    "n, expect",
    [(0, 1), (1, 1), (2, 2), (3, 6), (4, 24), (5, 120), (6, 720), (7, 5040), (10, 3628800), (-1, 0)],
)
def test_factorial(n, expect):
    assert factorial(n) == expect


class ScoreByFirstOperand(Operation):
    name = "Probe"
    symbol = "#"
    arity = Arity.UNARY
    category = Category.BASIC

    def apply(self, operands):
        return operands[0]

    def score_difficulty(self, operands, answer):
        return float(operands[0])

    def format(self, operands):
        return f"#{operands[0]}"

    def generate(self, difficulty):
        return Question((1,), self, 1, "#1")


def test_best_question_returns_first_in_range():
    op = ScoreByFirstOperand()
    candidates = iter([([9], 9), ([1], 1), ([2], 2)])
    q = best_question(op, Difficulty.BEGINNER, lambda: next(candidates))
    assert q.operands == (1,)
    assert q.answer == 1
    assert q.display == "#1"
    assert q.operation is op


def test_best_question_falls_back_to_closest():
    op = ScoreByFirstOperand()
    calls = []

    def make():
        calls.append(1)
        return ([9 if len(calls) % 2 else 4], 0)

    q = best_question(op, Difficulty.BEGINNER, make)
    assert q.operands == (4,)
    assert len(calls) == 100


def test_best_question_skips_discarded_candidates():
    op = ScoreByFirstOperand()
    candidates = iter([None, None, ([5], 5)])
    q = best_question(op, Difficulty.MEDIUM, lambda: next(candidates))
    assert q.operands == (5,)


def test_best_question_all_discarded_raises():
    with pytest.raises(RuntimeError):
        best_question(ScoreByFirstOperand(), Difficulty.EASY, lambda: None)