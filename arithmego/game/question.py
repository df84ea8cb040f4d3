"""Questions and the result of checking an answer."""

from __future__ import annotations

from dataclasses import dataclass

from arithmego.game.operation import Operation


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of checking a user's answer."""

    correct: bool
    user_answer: int
    correct_answer: int


@dataclass(frozen=True)
class Question:
    """A single arithmetic question."""

    operands: tuple[int, ...]
    operation: Operation
    answer: int
    display: str

    def check_answer(self, user_answer: int) -> AnswerResult:
        """Compare ``user_answer`` with the expected answer."""
        return AnswerResult(
            correct=user_answer == self.answer,
            user_answer=user_answer,
            correct_answer=self.answer,
        )