"""Registry of the available operations, keyed by name."""

from __future__ import annotations

from arithmego.game.operation import Category, Operation
from arithmego.operations.advanced import Factorial, Modulo, Percentage, Power
from arithmego.operations.basic import Addition, Division, Multiplication, Subtraction
from arithmego.operations.powers import Cube, CubeRoot, Square, SquareRoot

_registry: dict[str, Operation] = {}


def register(operation: Operation) -> None:
    """Add ``operation`` under its name, replacing any operation of that name."""
    _registry[operation.name] = operation


def get(name: str) -> Operation | None:
    """Return the operation called ``name``, or None if there is none."""
    return _registry.get(name)


def all_operations() -> list[Operation]:
    """Return every registered operation."""
    return list(_registry.values())


def by_category(category: Category) -> list[Operation]:
    """Return the registered operations in ``category``."""
    return [op for op in _registry.values() if op.category == category]


def basic_operations() -> list[Operation]:
    """Return addition, subtraction, multiplication and division."""
    return by_category(Category.BASIC)


def power_operations() -> list[Operation]:
    """Return squares, cubes and their roots."""
    return by_category(Category.POWER)


def advanced_operations() -> list[Operation]:
    """Return modulo, factorial, percentage and power."""
    return by_category(Category.ADVANCED)


for _operation in (
    Addition(),
    Subtraction(),
    Multiplication(),
    Division(),
    Square(),
    Cube(),
    SquareRoot(),
    CubeRoot(),
    Modulo(),
    Factorial(),
    Percentage(),
    Power(),
):
    register(_operation)