"""State of a single timed game session.

Durations and response times are in seconds.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from arithmego.game.difficulty import Difficulty
from arithmego.game.engine import generate_question
from arithmego.game.operation import Operation
from arithmego.game.question import Question
from arithmego.game.scoring import (
    ScoreResult,
    StreakTier,
    calculate_correct_answer,
    calculate_skip,
    calculate_wrong_answer,
    get_streak_tier,
    streak_bonus,
)


@dataclass(frozen=True)
class QuestionHistory:
    """What happened to one question during a session."""

    question: str
    operation: str
    correct_answer: int
    user_answer: int
    correct: bool
    skipped: bool
    response_time: float
    points_earned: int


@dataclass(eq=False)
class Session:
    """A timed game session drawing questions from one or more operations."""

    operations: Sequence[Operation]
    difficulty: Difficulty
    duration: float
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    start_time: float | None = field(default=None, init=False)
    time_left: float = field(init=False)
    current: Question | None = field(default=None, init=False)
    question_start: float = field(default=0.0, init=False)

    correct: int = field(default=0, init=False)
    incorrect: int = field(default=0, init=False)
    skipped: int = field(default=0, init=False)
    history: list[QuestionHistory] = field(default_factory=list, init=False)

    score: int = field(default=0, init=False)
    streak: int = field(default=0, init=False)
    best_streak: int = field(default=0, init=False)
    last_result: ScoreResult | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.time_left = self.duration

    def start(self) -> None:
        """Start the timer, reset the score and show the first question."""
        self.start_time = self.clock()
        self.time_left = self.duration
        self.score = 0
        self.streak = 0
        self.best_streak = 0
        self.last_result = None
        self.next_question()

    def tick(self) -> None:
        """Update the time remaining from the clock."""
        if self.start_time is None:
            raise RuntimeError("session has not been started")
        elapsed = self.clock() - self.start_time
        self.time_left = max(0.0, self.duration - elapsed)

    def is_finished(self) -> bool:
        """Return True once the time has run out."""
        return self.time_left <= 0

    def next_question(self) -> None:
        """Generate a new current question."""
        self.current = generate_question(self.operations, self.difficulty)
        self.question_start = self.clock()

    def submit_answer(self, answer: int) -> bool:
        """Check ``answer`` against the current question, score it and move on.

        Returns True if the answer was correct.
        """
        question = self.current
        if question is None:
            return False

        result = question.check_answer(answer)
        response_time = self.clock() - self.question_start

        if result.correct:
            self.correct += 1
            outcome = calculate_correct_answer(self.difficulty, response_time, self.streak)
            self.streak = outcome.new_streak
            self.best_streak = max(self.best_streak, self.streak)
        else:
            self.incorrect += 1
            outcome = calculate_wrong_answer()
            self.streak = 0

        self.score += outcome.points
        self.last_result = outcome
        self.history.append(
            QuestionHistory(
                question=question.display,
                operation=question.operation.name,
                correct_answer=question.answer,
                user_answer=answer,
                correct=result.correct,
                skipped=False,
                response_time=response_time,
                points_earned=outcome.points,
            )
        )

        self.next_question()
        return result.correct

    def skip(self) -> None:
        """Skip the current question without answering."""
        question = self.current
        if question is not None:
            self.history.append(
                QuestionHistory(
                    question=question.display,
                    operation=question.operation.name,
                    correct_answer=question.answer,
                    user_answer=0,
                    correct=False,
                    skipped=True,
                    response_time=self.clock() - self.question_start,
                    points_earned=0,
                )
            )

        self.skipped += 1
        outcome = calculate_skip()
        self.score += outcome.points
        self.streak = 0
        self.last_result = outcome
        self.next_question()

    def resume(self) -> None:
        """Restart the timer after a pause, keeping the time already used."""
        self.start_time = self.clock() - (self.duration - self.time_left)

    def accuracy(self) -> float:
        """Return the percentage of answered questions that were correct."""
        total = self.total_answered()
        if total == 0:
            return 0.0
        return self.correct / total * 100

    def total_answered(self) -> int:
        """Return the number of correct plus incorrect answers."""
        return self.correct + self.incorrect

    def streak_tier(self) -> StreakTier:
        """Return the tier of the current streak."""
        return get_streak_tier(self.streak)

    def multiplier(self) -> float:
        """Return the current streak multiplier."""
        return streak_bonus(self.streak)

    def clear_last_result(self) -> None:
        """Forget the last result once it has been shown."""
        self.last_result = None

    def avg_response_time(self) -> float:
        """Return the mean response time of answered (not skipped) questions."""
        times = [h.response_time for h in self.history if not h.skipped]
        if not times:
            return 0.0
        return sum(times) / len(times)