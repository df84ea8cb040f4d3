"""Registry of game modes and the built-in presets."""

from __future__ import annotations

from collections.abc import Sequence

from arithmego.game.difficulty import Difficulty
from arithmego.game.operation import Operation
from arithmego.modes.mode import Mode, ModeCategory
from arithmego.operations import registry as operations_registry

ID_ADDITION_SPRINT = "addition-sprint"
ID_SUBTRACTION_SPRINT = "subtraction-sprint"
ID_MULTIPLICATION_SPRINT = "multiplication-sprint"
ID_DIVISION_SPRINT = "division-sprint"
ID_MIXED_OPERATIONS = "mixed-operations"
ID_SPEED_ROUND = "speed-round"
ID_ENDURANCE = "endurance"

_BASIC_FOUR = ("Addition", "Subtraction", "Multiplication", "Division")

# Insertion order of the dict is the registration order.
_registry: dict[str, Mode] = {}


def register(mode: Mode) -> None:
    """Add ``mode`` under its ID, replacing any mode with that ID."""
    _registry[mode.id] = mode


def get(mode_id: str) -> Mode | None:
    """Return the mode with ``mode_id``, or None if there is none."""
    return _registry.get(mode_id)


def all_modes() -> list[Mode]:
    """Return every registered mode in registration order."""
    return list(_registry.values())


def by_category(category: ModeCategory) -> list[Mode]:
    """Return the registered modes in ``category``, in registration order."""
    return [mode for mode in _registry.values() if mode.category == category]


def _operations(names: Sequence[str]) -> list[Operation]:
    """Look up operations by name; raises LookupError for an unknown name."""
    found = []
    for name in names:
        operation = operations_registry.get(name)
        if operation is None:
            raise LookupError(f"unknown operation {name!r}")
        found.append(operation)
    return found


def register_presets() -> None:
    """Register the built-in modes."""
    sprints = (
        (ID_ADDITION_SPRINT, "Addition Sprint", "Master addition with rapid-fire problems", "Addition"),
        (ID_SUBTRACTION_SPRINT, "Subtraction Sprint", "Sharpen your subtraction skills", "Subtraction"),
        (
            ID_MULTIPLICATION_SPRINT,
            "Multiplication Sprint",
            "Multiply your way to victory",
            "Multiplication",
        ),
        (ID_DIVISION_SPRINT, "Division Sprint", "Divide and conquer", "Division"),
    )
    for mode_id, name, description, operation in sprints:
        register(
            Mode(
                id=mode_id,
                name=name,
                description=description,
                operations=_operations([operation]),
                default_difficulty=Difficulty.MEDIUM,
                default_duration=60,
                category=ModeCategory.SPRINT,
            )
        )

    challenges = (
        (
            ID_MIXED_OPERATIONS,
            "Mixed Operations",
            "All four basic operators in one session",
            Difficulty.MEDIUM,
            60,
        ),
        (ID_SPEED_ROUND, "Speed Round", "30 seconds of intense arithmetic", Difficulty.EASY, 30),
        (ID_ENDURANCE, "Endurance", "Two minutes of sustained focus", Difficulty.MEDIUM, 120),
    )
    for mode_id, name, description, difficulty, duration in challenges:
        register(
            Mode(
                id=mode_id,
                name=name,
                description=description,
                operations=_operations(_BASIC_FOUR),
                default_difficulty=difficulty,
                default_duration=duration,
                category=ModeCategory.CHALLENGE,
            )
        )