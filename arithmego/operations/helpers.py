"""Numeric helpers shared by the operation implementations."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Operation
from arithmego.game.question import Question

GENERATE_ATTEMPTS = 100

Candidate = tuple[Sequence[int], int]


def count_digits(n: int) -> int:
    """Return the number of decimal digits in ``n``."""
    return len(str(abs(n)))


def count_carries(a: int, b: int) -> int:
    """Return the number of carries when adding ``a`` and ``b`` column-wise."""
    a, b = abs(a), abs(b)
    carries = carry = 0
    while a > 0 or b > 0:
        carry = 1 if a % 10 + b % 10 + carry >= 10 else 0
        carries += carry
        a //= 10
        b //= 10
    return carries


def count_borrows(a: int, b: int) -> int:
    """Return the number of borrows when subtracting the smaller from the larger."""
    a, b = abs(a), abs(b)
    if a < b:
        a, b = b, a
    borrows = borrow = 0
    while a > 0 or b > 0:
        borrow = 1 if a % 10 - b % 10 - borrow < 0 else 0
        borrows += borrow
        a //= 10
        b //= 10
    return borrows


def count_zeros_crossed(a: int) -> int:
    """Return the number of zero digits in a positive ``a``."""
    if a <= 0:
        return 0
    return str(a).count("0")


def is_nice_number(n: int) -> bool:
    """Return True for multiples of 10 or 25, and multiples of 5 below 100."""
    n = abs(n)
    return n % 10 == 0 or n % 25 == 0 or (n % 5 == 0 and n < 100)


def is_round_number(n: int) -> bool:
    """Return True for multiples of 10."""
    return abs(n) % 10 == 0


def crosses_boundary(a: int, b: int, result: int) -> bool:
    """Return True if ``result`` reaches the next power of ten above ``a``."""
    if a <= 0:
        return False
    return result >= power_of_10_above(a)


def power_of_10_above(n: int) -> int:
    """Return the smallest power of ten greater than ``n`` (at least 10)."""
    p = 10
    while p <= n:
        p *= 10
    return p


def clamp_score(score: float) -> float:
    """Clamp a difficulty score to the range 1.0–10.0."""
    return min(10.0, max(1.0, score))


def distance_from_range(score: float, low: float, high: float) -> float:
    """Return how far ``score`` lies outside [low, high], or 0 inside it."""
    if score < low:
        return low - score
    if score > high:
        return score - high
    return 0.0


def random_in_range(low: int, high: int) -> int:
    """Return a random integer in [low, high]; the bounds may be given in either order."""
    if low > high:
        low, high = high, low
    return random.randint(low, high)


def is_times_table_fact(divisor: int, quotient: int) -> bool:
    """Return True if both numbers are within the 12× tables."""
    return divisor <= 12 and quotient <= 12


def int_pow(base: int, exp: int) -> int:
    """Return ``base ** exp``, or 0 for a negative exponent."""
    if exp < 0:
        return 0
    return base**exp


def factorial(n: int) -> int:
    """Return ``n!``, or 0 for negative ``n``."""
    if n < 0:
        return 0
    return math.factorial(n)


def best_question(
    operation: Operation,
    difficulty: Difficulty,
    make_candidate: Callable[[], Candidate | None],
) -> Question:
    """Build a question whose score fits ``difficulty``.

    ``make_candidate`` returns ``(operands, answer)`` or None to discard the
    attempt. The first candidate scoring within the tier's range is returned;
    otherwise the closest one seen. Raises RuntimeError if every attempt was
    discarded.
    """
    low, high = difficulty.score_range()
    best: Question | None = None
    best_distance = math.inf

    for _ in range(GENERATE_ATTEMPTS):
        candidate = make_candidate()
        if candidate is None:
            continue
        raw_operands, answer = candidate
        operands = tuple(raw_operands)
        score = operation.score_difficulty(operands, answer)
        question = Question(operands, operation, answer, operation.format(operands))
        if low <= score <= high:
            return question
        distance = distance_from_range(score, low, high)
        if distance < best_distance:
            best, best_distance = question, distance

    if best is None:
        raise RuntimeError(f"{operation.name}: could not generate a question")
    return best