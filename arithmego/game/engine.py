"""Question generation across one or more operations."""

from __future__ import annotations

import random
from collections.abc import Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Operation
from arithmego.game.question import Question


def generate_question(operations: Sequence[Operation], difficulty: Difficulty) -> Question:
    """Generate a question from an operation picked at random.

    Raises ValueError if ``operations`` is empty.
    """
    if not operations:
        raise ValueError("generate_question: no operations provided")
    return random.choice(operations).generate(difficulty)


def generate_question_for_operation(operation: Operation, difficulty: Difficulty) -> Question:
    """Generate a question using the given operation."""
    return operation.generate(difficulty)