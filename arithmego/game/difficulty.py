"""Difficulty tiers used for question generation and scoring."""

from __future__ import annotations

from enum import IntEnum


class Difficulty(IntEnum):
    """Difficulty tier for question generation."""

    BEGINNER = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    def __str__(self) -> str:
        return self.name.title()

    def score_range(self) -> tuple[float, float]:
        """Return the (min, max) difficulty score accepted by this tier."""
        return _SCORE_RANGES[self]

    def accepts_score(self, score: float) -> bool:
        """Return True if ``score`` falls within this tier's range."""
        low, high = self.score_range()
        return low <= score <= high


_SCORE_RANGES: dict[Difficulty, tuple[float, float]] = {
    Difficulty.BEGINNER: (1.0, 2.0),
    Difficulty.EASY: (2.0, 4.0),
    Difficulty.MEDIUM: (4.0, 6.0),
    Difficulty.HARD: (6.0, 8.0),
    Difficulty.EXPERT: (8.0, 10.0),
}


def all_difficulties() -> list[Difficulty]:
    """Return every difficulty tier, easiest first."""
    return list(Difficulty)


def parse_difficulty(s: str) -> Difficulty:
    """Convert a display name to a Difficulty; unknown names give MEDIUM."""
    by_name = {str(d): d for d in Difficulty}
    return by_name.get(s, Difficulty.MEDIUM)