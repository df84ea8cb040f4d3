"""The abstract arithmetic operation and its metadata types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arithmego.game.difficulty import Difficulty
    from arithmego.game.question import Question


class Arity(IntEnum):
    """Number of operands an operation takes."""

    UNARY = 1
    BINARY = 2


class Category(str, Enum):
    """Grouping of operations used when building modes."""

    BASIC = "basic"
    POWER = "power"
    ADVANCED = "advanced"

    def __str__(self) -> str:
        return self.value


class Operation(ABC):
    """An arithmetic operation that can compute, score, generate and format questions.

    Subclasses set ``name``, ``symbol``, ``arity`` and ``category``.
    """

    name: str
    symbol: str
    arity: Arity
    category: Category

    @abstractmethod
    def apply(self, operands: Sequence[int]) -> int:
        """Compute the result for the given operands."""

    @abstractmethod
    def score_difficulty(self, operands: Sequence[int], answer: int) -> float:
        """Return a difficulty score between 1.0 and 10.0."""

    @abstractmethod
    def generate(self, difficulty: Difficulty) -> Question:
        """Generate a question matching the requested difficulty tier."""

    @abstractmethod
    def format(self, operands: Sequence[int]) -> str:
        """Render the operands as a question string."""