"""Points, streak tiers and multipliers.

Response times are given in seconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from arithmego.game.difficulty import Difficulty

BASE_POINTS_CORRECT = 100
BASE_POINTS_WRONG = -25
BASE_POINTS_SKIP = 0

MAX_TIME_BONUS = 1.5
TIME_BONUS_FLOOR = 1.0
INSTANT_THRESHOLD = 2.0
TIME_BONUS_DECAY = 10.0

MAX_STREAK_BONUS = 2.0
STREAK_BONUS_STEP = 0.25
STREAK_MILESTONE_SIZE = 5


class StreakTier(IntEnum):
    """Visual tier of a streak."""

    NONE = 0
    BUILDING = 1
    STREAK = 2
    MAX = 3
    BLAZING = 4
    UNSTOPPABLE = 5
    LEGENDARY = 6

    def __str__(self) -> str:
        if self in (StreakTier.NONE, StreakTier.BUILDING):
            return ""
        return self.name


_MILESTONES = {
    5: "×1.25",
    10: "×1.5",
    15: "×1.75",
    20: "×2.0 MAX",
    25: "LEGENDARY",
}

_DIFFICULTY_MULTIPLIERS = {
    Difficulty.BEGINNER: 0.5,
    Difficulty.EASY: 0.75,
    Difficulty.MEDIUM: 1.0,
    Difficulty.HARD: 1.5,
    Difficulty.EXPERT: 2.0,
}


@dataclass(frozen=True)
class ScoreResult:
    """Result of scoring one answer."""

    points: int
    new_streak: int
    old_tier: StreakTier
    new_tier: StreakTier
    is_milestone: bool


def get_milestone_announcement(streak: int) -> str:
    """Return the announcement for a milestone streak, or an empty string."""
    return _MILESTONES.get(streak, "")


def get_streak_tier(streak: int) -> StreakTier:
    """Return the tier for a streak count."""
    if streak == 0:
        return StreakTier.NONE
    if streak < 5:
        return StreakTier.BUILDING
    if streak < 10:
        return StreakTier.STREAK
    if streak < 15:
        return StreakTier.MAX
    if streak < 20:
        return StreakTier.BLAZING
    if streak < 25:
        return StreakTier.UNSTOPPABLE
    return StreakTier.LEGENDARY


def difficulty_multiplier(difficulty: Difficulty) -> float:
    """Return the point multiplier for a difficulty."""
    return _DIFFICULTY_MULTIPLIERS.get(difficulty, 1.0)


def time_bonus(response_time: float) -> float:
    """Return 1.5 below 2 s, decaying linearly to 1.0 at 10 s and beyond."""
    if response_time < INSTANT_THRESHOLD:
        return MAX_TIME_BONUS
    if response_time >= TIME_BONUS_DECAY:
        return TIME_BONUS_FLOOR
    elapsed = response_time - INSTANT_THRESHOLD
    window = TIME_BONUS_DECAY - INSTANT_THRESHOLD
    return MAX_TIME_BONUS - elapsed / window * (MAX_TIME_BONUS - TIME_BONUS_FLOOR)


def streak_bonus(streak: int) -> float:
    """Return the streak multiplier: +0.25 every 5 correct answers, capped at 2.0."""
    if streak <= 0:
        return 1.0
    bonus = 1.0 + (streak // STREAK_MILESTONE_SIZE) * STREAK_BONUS_STEP
    return min(bonus, MAX_STREAK_BONUS)


def calculate_points(difficulty: Difficulty, response_time: float, streak: int) -> int:
    """Return points for a correct answer with all multipliers applied."""
    points = (
        BASE_POINTS_CORRECT
        * difficulty_multiplier(difficulty)
        * time_bonus(response_time)
        * streak_bonus(streak)
    )
    return int(points)


def calculate_correct_answer(
    difficulty: Difficulty, response_time: float, current_streak: int
) -> ScoreResult:
    """Score a correct answer using the streak held before it, then extend the streak."""
    new_streak = current_streak + 1
    return ScoreResult(
        points=calculate_points(difficulty, response_time, current_streak),
        new_streak=new_streak,
        old_tier=get_streak_tier(current_streak),
        new_tier=get_streak_tier(new_streak),
        is_milestone=get_milestone_announcement(new_streak) != "",
    )


def calculate_wrong_answer() -> ScoreResult:
    """Return the penalty for a wrong answer."""
    return ScoreResult(BASE_POINTS_WRONG, 0, StreakTier.NONE, StreakTier.NONE, False)


def calculate_skip() -> ScoreResult:
    """Return the result for a skipped question."""
    return ScoreResult(BASE_POINTS_SKIP, 0, StreakTier.NONE, StreakTier.NONE, False)