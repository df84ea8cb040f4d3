"""Power operations: squares, cubes, square roots and cube roots."""

from __future__ import annotations

import math
from collections.abc import Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Arity, Category, Operation
from arithmego.game.question import Question
from arithmego.operations.helpers import Candidate, best_question, clamp_score, random_in_range

_Range = tuple[int, int]

_SQUARE_RANGES: dict[Difficulty, _Range] = {
    Difficulty.BEGINNER: (2, 10),
    Difficulty.EASY: (5, 15),
    Difficulty.MEDIUM: (10, 20),
    Difficulty.HARD: (15, 30),
    Difficulty.EXPERT: (20, 50),
}

_CUBE_RANGES: dict[Difficulty, _Range] = {
    Difficulty.BEGINNER: (2, 5),
    Difficulty.EASY: (2, 7),
    Difficulty.MEDIUM: (4, 10),
    Difficulty.HARD: (6, 12),
    Difficulty.EXPERT: (8, 15),
}

# Ranges of the root; the operand is generated from it so it is always a perfect power.
_SQUARE_ROOT_RANGES: dict[Difficulty, _Range] = {
    Difficulty.BEGINNER: (2, 10),
    Difficulty.EASY: (5, 15),
    Difficulty.MEDIUM: (10, 25),
    Difficulty.HARD: (15, 35),
    Difficulty.EXPERT: (25, 50),
}

_CUBE_ROOT_RANGES: dict[Difficulty, _Range] = {
    Difficulty.BEGINNER: (2, 5),
    Difficulty.EASY: (3, 7),
    Difficulty.MEDIUM: (5, 10),
    Difficulty.HARD: (7, 15),
    Difficulty.EXPERT: (10, 20),
}

_COMMON_SQUARES = frozenset({1, 2, 3, 4, 5, 10})
_COMMON_CUBES = frozenset({1, 2, 3, 10})
_COMMON_SQUARE_ROOTS = frozenset({2, 3, 4, 5, 6, 7, 8, 9, 10})
_COMMON_CUBE_ROOTS = frozenset({2, 3, 4, 5, 10})


def _pick(ranges: dict[Difficulty, _Range], difficulty: Difficulty) -> int:
    low, high = ranges.get(difficulty, ranges[Difficulty.BEGINNER])
    return random_in_range(low, high)


def _integer_cube_root(n: int) -> int:
    """Return the cube root of ``n`` truncated toward zero."""
    magnitude = abs(n)
    root = round(magnitude ** (1.0 / 3.0))
    while root > 0 and root**3 > magnitude:
        root -= 1
    while (root + 1) ** 3 <= magnitude:
        root += 1
    return -root if n < 0 else root


class Square(Operation):
    """n²."""

    name = "Square"
    symbol = "²"
    arity = Arity.UNARY
    category = Category.POWER

    def apply(self, operands: Sequence[int]) -> int:
        return operands[0] * operands[0]

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]}²"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by size of n, with bonuses for common, round and ending-in-5 numbers."""
        n = operands[0]
        score = 1.0
        if n <= 12:
            score += 0.5
        elif n <= 15:
            score += 1.5
        elif n <= 20:
            score += 2.5
        elif n <= 25:
            score += 3.5
        elif n <= 30:
            score += 4.5
        else:
            score += 5.5

        if n in _COMMON_SQUARES:
            score -= 0.5
        if n % 10 == 0:
            score -= 0.5
        if n > 5 and n % 10 == 5:
            score -= 0.3
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate:
            operands = (_pick(_SQUARE_RANGES, difficulty),)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class Cube(Operation):
    """n³."""

    name = "Cube"
    symbol = "³"
    arity = Arity.UNARY
    category = Category.POWER

    def apply(self, operands: Sequence[int]) -> int:
        n = operands[0]
        return n * n * n

    def format(self, operands: Sequence[int]) -> str:
        return f"{operands[0]}³"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by size of n, with bonuses for common and round numbers."""
        n = operands[0]
        score = 1.0
        if n <= 5:
            score += 1.0
        elif n <= 10:
            score += 3.0
        elif n <= 15:
            score += 5.0
        else:
            score += 7.0

        if n in _COMMON_CUBES:
            score -= 1.0
        if n % 10 == 0:
            score -= 0.5
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate:
            operands = (_pick(_CUBE_RANGES, difficulty),)
            return operands, self.apply(operands)

        return best_question(self, difficulty, candidate)


class SquareRoot(Operation):
    """√n, always generated from a perfect square."""

    name = "Square Root"
    symbol = "√"
    arity = Arity.UNARY
    category = Category.POWER

    def apply(self, operands: Sequence[int]) -> int:
        """Return the integer square root; raises ValueError for a negative operand."""
        return math.isqrt(operands[0])

    def format(self, operands: Sequence[int]) -> str:
        return f"√{operands[0]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by size of the root, with a bonus for common roots."""
        score = 1.0
        if answer <= 12:
            score += 0.5
        elif answer <= 20:
            score += 1.5
        elif answer <= 30:
            score += 2.5
        else:
            score += 3.5

        if answer in _COMMON_SQUARE_ROOTS:
            score -= 0.5
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate:
            root = _pick(_SQUARE_ROOT_RANGES, difficulty)
            return (root * root,), root

        return best_question(self, difficulty, candidate)


class CubeRoot(Operation):
    """∛n, always generated from a perfect cube."""

    name = "Cube Root"
    symbol = "∛"
    arity = Arity.UNARY
    category = Category.POWER

    def apply(self, operands: Sequence[int]) -> int:
        """Return the cube root truncated toward zero."""
        return _integer_cube_root(operands[0])

    def format(self, operands: Sequence[int]) -> str:
        return f"∛{operands[0]}"

    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Score by size of the root, with a bonus for common roots."""
        score = 1.0
        if answer <= 5:
            score += 1.0
        elif answer <= 10:
            score += 2.5
        elif answer <= 15:
            score += 4.0
        else:
            score += 5.5

        if answer in _COMMON_CUBE_ROOTS:
            score -= 0.5
        return clamp_score(score)

    def generate(self, difficulty: Difficulty) -> Question:
        def candidate() -> Candidate:
            root = _pick(_CUBE_ROOT_RANGES, difficulty)
            return (root * root * root,), root

        return best_question(self, difficulty, candidate)