"""Game modes and the selectable session durations.

Durations are in seconds.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Operation


class ModeCategory(IntEnum):
    """How modes are grouped in the UI."""

    SPRINT = 0
    CHALLENGE = 1

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Mode:
    """A game mode: a set of operations with default settings."""

    id: str
    name: str
    description: str
    operations: Sequence[Operation]
    default_difficulty: Difficulty
    default_duration: float
    category: ModeCategory

    def __post_init__(self) -> None:
        object.__setattr__(self, "operations", tuple(self.operations))

    def is_single_operation(self) -> bool:
        """Return True if the mode uses exactly one operation."""
        return len(self.operations) == 1

    def operation_names(self) -> list[str]:
        """Return the names of the mode's operations in order."""
        return [op.name for op in self.operations]


@dataclass(frozen=True)
class Duration:
    """A selectable game duration."""

    value: float
    label: str


ALLOWED_DURATIONS: tuple[Duration, ...] = (
    Duration(30, "30 seconds"),
    Duration(60, "1 minute"),
    Duration(90, "90 seconds"),
    Duration(120, "2 minutes"),
)


def find_duration_index(duration: float) -> int:
    """Return the index of ``duration`` in ALLOWED_DURATIONS, or 0 if absent."""
    return next(
        (i for i, allowed in enumerate(ALLOWED_DURATIONS) if allowed.value == duration),
        0,
    )