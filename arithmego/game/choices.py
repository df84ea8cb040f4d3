"""Multiple-choice answer generation."""

from __future__ import annotations

import random
from itertools import chain

from arithmego.game.difficulty import Difficulty

_SMALL_ANSWER_THRESHOLD = 20
_SMALL_ANSWER_MAX_OFFSET = 5
_MIN_OFFSET_PERCENT = 10
_MAX_OFFSET_PERCENT = 30
_EASY_OFFSET_MULTIPLIER = 1.5
_HARD_OFFSET_MULTIPLIER = 0.7

_DISTRACTOR_COUNT = 3
_MAX_ATTEMPTS = 100
_FALLBACK_OFFSETS = (1, 2, 3, -1, -2, -3, 4, 5, -4, -5)
_MAX_GUARANTEED_OFFSET = 1000


def generate_choices(answer: int, difficulty: Difficulty) -> tuple[list[int], int]:
    """Return four shuffled choices and the index of the correct one."""
    choices = [answer, *_generate_distractors(answer, difficulty)]
    random.shuffle(choices)
    return choices, choices.index(answer)


def _generate_distractors(answer: int, difficulty: Difficulty) -> list[int]:
    found: set[int] = set()

    def accept(candidate: int) -> None:
        # Non-negative answers never get negative distractors.
        if candidate != answer and candidate not in found and (answer < 0 or candidate >= 0):
            found.add(candidate)

    for _ in range(_MAX_ATTEMPTS):
        if len(found) >= _DISTRACTOR_COUNT:
            break
        accept(_generate_distractor(answer, difficulty))

    fallback = chain(_FALLBACK_OFFSETS, range(1, _MAX_GUARANTEED_OFFSET + 1))
    for offset in fallback:
        if len(found) >= _DISTRACTOR_COUNT:
            break
        accept(answer + offset)

    return sorted(found)[:_DISTRACTOR_COUNT]


def _generate_distractor(answer: int, difficulty: Difficulty) -> int:
    magnitude = abs(answer)
    if magnitude < _SMALL_ANSWER_THRESHOLD:
        offset = random.randint(1, _SMALL_ANSWER_MAX_OFFSET)
    else:
        percentage = random.randint(_MIN_OFFSET_PERCENT, _MAX_OFFSET_PERCENT) / 100.0
        offset = max(1, int(magnitude * percentage))

    if difficulty in (Difficulty.BEGINNER, Difficulty.EASY):
        offset = int(offset * _EASY_OFFSET_MULTIPLIER)
    elif difficulty in (Difficulty.HARD, Difficulty.EXPERT):
        offset = max(1, int(offset * _HARD_OFFSET_MULTIPLIER))

    return answer + offset if random.randrange(2) == 0 else answer - offset