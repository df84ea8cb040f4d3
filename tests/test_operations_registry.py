import pytest

from arithmego.game.difficulty import all_difficulties
from arithmego.game.operation import Arity, Category
from arithmego.operations import registry

EXPECTED_NAMES = [
    "Addition", "Subtraction", "Multiplication", "Division",
    "Square", "Cube", "Square Root", "Cube Root",
    "Modulo", "Power", "Percentage", "Factorial",
]


def test_registry_contains_all_operations():
    ops = registry.all_operations()
    assert len(ops) == 12
    assert sorted(op.name for op in ops) == sorted(EXPECTED_NAMES)
    for name in EXPECTED_NAMES:
        assert registry.get(name).name == name


@pytest.mark.parametrize(
    "getter, category",
    [
        (registry.basic_operations, Category.BASIC),
        (registry.power_operations, Category.POWER),
        (registry.advanced_operations, Category.ADVANCED),
    ],
)
def test_category_lists(getter, category):
    ops = getter()
    assert len(ops) == 4
    assert all(op.category == category for op in ops)


def test_by_category_matches_basic():
    assert registry.by_category(Category.BASIC) == registry.basic_operations()


def test_get_operation():
    op = registry.get("Addition")
    assert op.name == "Addition"
    assert registry.get("NonExistent") is None


def test_register_replaces_by_name():
    original = registry.get("Addition")
    replacement = type(original)()
    try:
        registry.register(replacement)
        assert registry.get("Addition") is replacement
        assert len(registry.all_operations()) == 12
    finally:
        registry.register(original)
    assert registry.get("Addition") is original


@pytest.mark.parametrize("name", EXPECTED_NAMES)
def test_all_operations_generate_valid_questions(name):
    op = registry.get(name)
    for difficulty in all_difficulties():
        for _ in range(5):
            q = op.generate(difficulty)
            assert q.operation is op
            assert q.display != ""
            assert q.answer == op.apply(q.operands)
            expected_len = 1 if op.arity == Arity.UNARY else 2
            assert len(q.operands) == expected_len