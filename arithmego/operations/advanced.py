"""Advanced operations: modulo, factorial, percentage and power."""

from __future__ import annotations

import math
from collections.abc import Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Arity, Category, Operation
from arithmego.game.question import Question
from arithmego.operations.helpers import (
    Candidate,
    best_question,
    clamp_score,
    count_digits,
    factorial,
    int_pow,
    random_in_range,
)

_Range = tuple[int, int]

_FACTORIAL_RANGES: dict[Difficulty, _Range] = {
    Difficulty.BEGINNER: (1, 4),
    Difficulty.EASY: (3, 5),
    Difficulty.MEDIUM: (4, 6),
    Difficulty.HARD: (5, 8),
    Difficulty.EXPERT: (7, 10),
}

# Base range and exponent range.
_POWER_RANGES: dict[Difficulty, tuple[_Range, _Range]] = {
    Difficulty.BEGINNER: ((2, 10), (2, 2)),
    Difficulty.EASY: ((2, 12), (2, 3)),
    Difficulty.MEDIUM: ((2, 10), (2, 4)),
    Difficulty.HARD: ((2, 8), (3, 5)),
    Difficulty.EXPERT: ((2, 6), (4, 6)),
}

_MAX_POWER_RESULT = 1_000_000

_EASY_PERCENTS = (10, 20, 25, 50, 100)
_MEDIUM_PERCENTS = (5, 10, 15, 20, 25, 30, 40, 50, 75)
_HARD_PERCENTS = (5, 10, 12, 15, 20, 25, 30, 35, 40, 45, 50, 60, 75, 80)
_SIMPLE_PERCENTS = frozenset({50, 25, 10, 20, 100})

# Percent choices, value range and fallback value for the tiers that keep division clean.
_PERCENTAGE_TIERS: dict[Difficulty, tuple[tuple[int, ...], _Range, int]] = {
    Difficulty.EASY: (_EASY_PERCENTS, (10, 100), 100),
    Difficulty.MEDIUM: (_MEDIUM_PERCENTS, (20, 200), 100),
    Difficulty.HARD: (_HARD_PERCENTS, (50, 500), 200),
}


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


def _choose(values: Sequence[int]) -> int:
    return values[random_in_range(0, len(values) - 1)]


class Modulo(Operation):
    """a mod b."""

    name = "Modulo"
    symbol = "mod"
    arity = Arity.BINARY
    category = Category.ADVANCED

    def apply(self, operands: Sequence[int]) -> int:
        """Return the remainder with the dividend's sign; raises ZeroDivisionError for b = 0."""
        if operands[1] == 0:
            raise ZeroDivisionError("modulo by zero")
        return _truncating_mod(operands[0], operands[1])

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]} mod {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by digit combination, easy divisors, quotient size and zero remainder."""
        dividend, divisor = operands[0], operands[1]
        score = 1.0
        dividend_digits = count_digits(dividend)
        divisor_digits = count_digits(divisor)

        combos = {
            (1, 1): 0.5,
            (2, 1): 1.5,
            (2, 2): 2.5,
            (3, 1): 2.0,
            (3, 2): 3.5,
        }
        score += combos.get(
            (dividend_digits, divisor_digits), (dividend_digits + divisor_digits) * 0.8
        )

        if divisor in (2, 5, 10):
            score -= 0.5

        quotient = _truncating_div(dividend, divisor)
        if quotient <= 5:
            score -= 0.3
        elif quotient > 10:
            score += 0.5

        if answer == 0:
            score -= 0.3
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate:
            if difficulty == Difficulty.EASY:
                divisor = random_in_range(2, 12)
                dividend = random_in_range(divisor + 1, 50)
            elif difficulty == Difficulty.MEDIUM:
                divisor = random_in_range(3, 15)
                dividend = random_in_range(20, 100)
            elif difficulty == Difficulty.HARD:
                divisor = random_in_range(5, 25)
                dividend = random_in_range(50, 200)
            elif difficulty == Difficulty.EXPERT:
                divisor = random_in_range(10, 50)
                dividend = random_in_range(100, 500)
            else:
                divisor = random_in_range(2, 9)
                dividend = random_in_range(divisor + 1, divisor * 5)
            operands = (dividend, divisor)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Factorial(Operation):
    """n!, generated for n up to 10."""

    name = "Factorial"
    symbol = "!"
    arity = Arity.UNARY
    category = Category.ADVANCED

    def apply(self, operands: Sequence[int]) -> int:
        return factorial(operands[0])

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]}!"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by n: small factorials are memorised, larger ones need computation."""
        n = operands[0]
        score = 1.0
        if n <= 3:
            score += 0.5
        elif n >= 10:
            score += 9.5
        else:
            score += {4: 1.5, 5: 2.5, 6: 4.0, 7: 5.5, 8: 7.0, 9: 8.5}[n]
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        low, high = _FACTORIAL_RANGES.get(difficulty, _FACTORIAL_RANGES[Difficulty.BEGINNER])

        def candidate() -> Candidate:
            operands = (random_in_range(low, high),)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Percentage(Operation):
    """a% of b, always generated with an integer result."""

    name = "Percentage"
    symbol = "% of"
    arity = Arity.BINARY
    category = Category.ADVANCED

    def apply(self, operands: Sequence[int]) -> int:
        """Return operands[0] percent of operands[1], truncated toward zero."""
        return _truncating_div(operands[0] * operands[1], 100)

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]}% of {operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by how friendly the percentage is and the size and roundness of the value."""
        percent, value = operands[0], operands[1]
        score = 1.0
        if percent in _SIMPLE_PERCENTS:
            score += 0.5
        elif percent % 10 == 0:
            score += 1.5
        elif percent % 5 == 0:
            score += 2.5
        else:
            score += 4.0

        score += (count_digits(value) - 1) * 0.5

        if value % 10 == 0:
            score -= 0.3
        if value % 100 == 0:
            score -= 0.5
        if value <= 100:
            score -= 0.3
        return clamp_score(score)

    def _operands(self, difficulty: Difficulty) -> tuple[int, int]:
        if difficulty == Difficulty.EXPERT:
            percent = random_in_range(1, 99)
            value = random_in_range(100, 1000)
            remainder = (percent * value) % 100
            if remainder != 0:
                value += (100 - remainder) // percent
                if (percent * value) % 100 != 0:
                    value = (value // 100) * 100 or 100
            return percent, value

        tier = _PERCENTAGE_TIERS.get(difficulty)
        if tier is None:
            percent = _choose(_EASY_PERCENTS)
            return percent, random_in_range(2, 20) * (100 // math.gcd(percent, 100))

        percents, (low, high), fallback = tier
        percent = _choose(percents)
        step = 100 // math.gcd(percent, 100)
        value = (random_in_range(low, high) // step) * step
        return percent, value or fallback

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate | None:
            percent, value = self._operands(difficulty)
            if (percent * value) % 100 != 0:
                return None
            operands = (percent, value)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Power(Operation):
    """a^b."""

    name = "Power"
    symbol = "^"
    arity = Arity.BINARY
    category = Category.ADVANCED

    def apply(self, operands: Sequence[int]) -> int:
        return int_pow(operands[0], operands[1])

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]}^{operands[1]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by exponent and base size, with bonuses for bases 2 and 10."""
        base, exp = operands[0], operands[1]
        if base == 1:
            return 1.0

        score = 1.0
        if exp == 2:
            if base <= 12:
                score += 0.5
            elif base <= 20:
                score += 2.0
            else:
                score += 3.5
        elif exp == 3:
            if base <= 5:
                score += 1.5
            elif base <= 10:
                score += 3.5
            else:
                score += 5.5
        elif exp == 4:
            score += 3.0 if base <= 5 else 5.5
        else:
            score += exp * 1.5

        if base == 2:
            score -= 0.5
        if base == 10:
            score -= 1.0
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        (base_low, base_high), (exp_low, exp_high) = _POWER_RANGES.get(
            difficulty, _POWER_RANGES[Difficulty.BEGINNER]
        )

        def candidate() -> Candidate | None:
            operands = (random_in_range(base_low, base_high), random_in_range(exp_low, exp_high))
            result = self.apply(operands)
            if result > _MAX_POWER_RESULT:
                return None
            return operands, result

        return best_question(self, difficulty, candidate)