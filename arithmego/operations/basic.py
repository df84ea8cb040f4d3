"""The four basic operations: addition, subtraction, multiplication and division."""

from __future__ import annotations

from collections.abc import Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Arity, Category, Operation
from arithmego.game.question import Question
from arithmego.operations.helpers import (
    Candidate,
    best_question,
    clamp_score,
    count_borrows,
    count_carries,
    count_digits,
    count_zeros_crossed,
    crosses_boundary,
    is_nice_number,
    is_round_number,
    is_times_table_fact,
    random_in_range,
)

_Range = tuple[int, int]

_ADDITION_RANGES: dict[Difficulty, tuple[_Range, _Range]] = {
    Difficulty.BEGINNER: ((1, 9), (1, 9)),
    Difficulty.EASY: ((10, 50), (10, 50)),
    Difficulty.MEDIUM: ((20, 200), (20, 200)),
    Difficulty.HARD: ((100, 500), (100, 500)),
    Difficulty.EXPERT: ((200, 999), (200, 999)),
}

# First operand range and the lower bound of the second; the second never exceeds the first.
_SUBTRACTION_RANGES: dict[Difficulty, tuple[_Range, int]] = {
    Difficulty.BEGINNER: ((2, 9), 1),
    Difficulty.EASY: ((20, 99), 10),
    Difficulty.MEDIUM: ((50, 300), 20),
    Difficulty.HARD: ((100, 999), 50),
    Difficulty.EXPERT: ((500, 9999), 200),
}

_MULTIPLICATION_RANGES: dict[Difficulty, tuple[_Range, _Range]] = {
    Difficulty.BEGINNER: ((2, 9), (2, 9)),
    Difficulty.EASY: ((2, 12), (10, 20)),
    Difficulty.MEDIUM: ((5, 15), (10, 30)),
    Difficulty.HARD: ((10, 30), (10, 50)),
    Difficulty.EXPERT: ((15, 50), (20, 99)),
}

# Divisor range and quotient range; the dividend is their product.
_DIVISION_RANGES: dict[Difficulty, tuple[_Range, _Range]] = {
    Difficulty.BEGINNER: ((2, 9), (2, 9)),
    Difficulty.EASY: ((2, 12), (2, 12)),
    Difficulty.MEDIUM: ((3, 15), (5, 20)),
    Difficulty.HARD: ((5, 20), (10, 30)),
    Difficulty.EXPERT: ((10, 30), (15, 50)),
}


def _pair(ranges: tuple[_Range, _Range]) -> tuple[int, int]:
    (low1, high1), (low2, high2) = ranges
    return random_in_range(low1, high1), random_in_range(low2, high2)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Addition(Operation):
    """a + b."""

    name = "Addition"
    symbol = "+"
    arity = Arity.BINARY
    category = Category.BASIC

    def apply(self, operands: Sequence[int]) -> int:
        return operands[0] + operands[1]

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]} + {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by digit count, carries, nice numbers and boundary crossings."""
        op1, op2 = operands[0], operands[1]
        score = 1.0
        score += (count_digits(op1) - 1) * 0.5
        score += (count_digits(op2) - 1) * 0.5
        score += count_carries(op1, op2) * 1.5
        if is_nice_number(op1) and is_nice_number(op2):
            score -= 1.0
        if crosses_boundary(op1, op2, answer):
            score += 0.5
        if is_round_number(answer):
            score -= 0.5
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        ranges = _ADDITION_RANGES.get(difficulty, _ADDITION_RANGES[Difficulty.BEGINNER])

        def candidate() -> Candidate:
            operands = _pair(ranges)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Subtraction(Operation):
    """a − b."""

    name = "Subtraction"
    symbol = "−"
    arity = Arity.BINARY
    category = Category.BASIC

    def apply(self, operands: Sequence[int]) -> int:
        return operands[0] - operands[1]

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]} − {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by digit count, borrows, zeros crossed, nice numbers and sign."""
        op1, op2 = operands[0], operands[1]
        score = 1.0
        score += (count_digits(op1) - 1) * 0.5
        score += (count_digits(op2) - 1) * 0.5

        borrows = count_borrows(op1, op2)
        score += borrows * 1.5

        # Borrowing across zeros (e.g. 1000 - 456) chains borrows.
        if op1 > op2:
            zeros = count_zeros_crossed(op1)
            if borrows > 0 and zeros > 0:
                score += min(zeros, borrows) * 1.0

        if is_nice_number(op1) and is_nice_number(op2):
            score -= 1.0
        if answer < 0:
            score += 1.0
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        (low1, high1), low2 = _SUBTRACTION_RANGES.get(
            difficulty, _SUBTRACTION_RANGES[Difficulty.BEGINNER]
        )

        def candidate() -> Candidate:
            op1 = random_in_range(low1, high1)
            op2 = random_in_range(low2, op1)
            operands = (op1, op2)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Multiplication(Operation):
    """a × b."""

    name = "Multiplication"
    symbol = "×"
    arity = Arity.BINARY
    category = Category.BASIC

    def apply(self, operands: Sequence[int]) -> int:
        return operands[0] * operands[1]

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]} × {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by digit combination, easy multipliers, oddness and squares."""
        op1, op2 = operands[0], operands[1]
        score = 1.0
        digits = {count_digits(op1), count_digits(op2)}
        d1, d2 = count_digits(op1), count_digits(op2)

        if d1 == 1 and d2 == 1:
            pass  # times table: memorised
        elif digits == {1, 2}:
            score += 2.0
        elif d1 == 2 and d2 == 2:
            score += 4.5
        elif digits == {1, 3}:
            score += 3.5
        else:
            score += float(d1 + d2)

        for easy in (10, 5, 2, 11):
            if easy in (op1, op2):
                score -= 0.5

        if op1 > 0 and op2 > 0 and op1 % 2 == 1 and op2 % 2 == 1:
            score += 0.5

        if op1 == op2 and op1 <= 12:
            score -= 0.3
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        ranges = _MULTIPLICATION_RANGES.get(
            difficulty, _MULTIPLICATION_RANGES[Difficulty.BEGINNER]
        )

        def candidate() -> Candidate:
            operands = _pair(ranges)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Division(Operation):
    """a ÷ b, always generated with an exact quotient."""

    name = "Division"
    symbol = "÷"
    arity = Arity.BINARY
    category = Category.BASIC

    def apply(self, operands: Sequence[int]) -> int:
        """Return the quotient truncated toward zero; raises ZeroDivisionError for b = 0."""
        if operands[1] == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_div(operands[0], operands[1])

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]} ÷ {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by times-table recall, digit combination, easy divisors and quotient size."""
        dividend, divisor = operands[0], operands[1]
        score = 1.0
        dividend_digits = count_digits(dividend)
        divisor_digits = count_digits(divisor)

        if not is_times_table_fact(divisor, answer):
            if divisor_digits == 1 and dividend_digits <= 2:
                score += 1.5
            elif divisor_digits == 1 and dividend_digits == 3:
                score += 2.5
            elif divisor_digits == 2 and dividend_digits == 2:
                score += 3.5
            elif divisor_digits == 2 and dividend_digits >= 3:
                score += 4.5

        if divisor in (2, 5, 10):
            score -= 0.5
        if answer > 12:
            score += 0.5
        if answer > 20:
            score += 0.5
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        ranges = _DIVISION_RANGES.get(difficulty, _DIVISION_RANGES[Difficulty.BEGINNER])

        def candidate() -> Candidate:
            divisor, quotient = _pair(ranges)
            return (divisor * quotient, divisor), quotient

        return best_question(self, difficulty, candidate)