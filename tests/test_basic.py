import pytest

from arithmego.game.difficulty import Difficulty, all_difficulties
from arithmego.game.operation import Arity, Category
from arithmego.operations.basic import Addition, Division, Multiplication, Subtraction


def test_addition_metadata():
    op = Addition()
    assert op.name == "Addition"
    assert op.symbol == "+"
    assert op.arity == Arity.BINARY
    assert op.category == Category.BASIC


@pytest.mark.parametrize(
    "operands, expected",
    [((3, 5), 8), ((0, 0), 0), ((100, 200), 300), ((-5, 10), 5)],
)
def test_addition_apply(operands, expected):
    assert Addition().apply(operands) == expected


def test_addition_format():
    assert Addition().format((5, 3)) == "5 + 3"


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_addition_generate(difficulty):
    op = Addition()
    q = op.generate(difficulty)
    assert q.answer == op.apply(q.operands)
    assert q.operation is op


@pytest.mark.parametrize(
    "difficulty, low, high",
    [
        (Difficulty.BEGINNER, 1, 9),
        (Difficulty.EASY, 10, 50),
        (Difficulty.MEDIUM, 20, 200),
        (Difficulty.HARD, 100, 500),
        (Difficulty.EXPERT, 200, 999),
    ],
)
def test_addition_generate_operand_ranges(difficulty, low, high):
    for _ in range(20):
        q = Addition().generate(difficulty)
        assert all(low <= n <= high for n in q.operands)


def test_subtraction_metadata():
    op = Subtraction()
    assert op.name == "Subtraction"
    assert op.symbol == "−"
    assert op.category == Category.BASIC


@pytest.mark.parametrize("operands, expected", [((8, 3), 5), ((10, 10), 0), ((5, 10), -5)])
def test_subtraction_apply(operands, expected):
    assert Subtraction().apply(operands) == expected


def test_subtraction_format():
    assert Subtraction().format((8, 3)) == "8 − 3"


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_subtraction_generate(difficulty):
    op = Subtraction()
    q = op.generate(difficulty)
    assert q.answer == op.apply(q.operands)


def test_subtraction_beginner_never_negative():
    for _ in range(50):
        q = Subtraction().generate(Difficulty.BEGINNER)
        assert q.answer >= 0


def test_subtraction_negative_result_adds_one():
    op = Subtraction()
    positive = op.score_difficulty((5, 3), 2)
    negative = op.score_difficulty((3, 5), -2)
    assert negative - positive == pytest.approx(1.0)


def test_multiplication_metadata():
    op = Multiplication()
    assert op.name == "Multiplication"
    assert op.symbol == "×"
    assert op.arity == Arity.BINARY


@pytest.mark.parametrize("operands, expected", [((6, 7), 42), ((0, 100), 0), ((12, 12), 144)])
def test_multiplication_apply(operands, expected):
    assert Multiplication().apply(operands) == expected


def test_multiplication_format():
    assert Multiplication().format((6, 7)) == "6 × 7"


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_multiplication_generate(difficulty):
    op = Multiplication()
    q = op.generate(difficulty)
    assert q.answer == op.apply(q.operands)


def test_division_metadata():
    op = Division()
    assert op.name == "Division"
    assert op.symbol == "÷"
    assert op.category == Category.BASIC


@pytest.mark.parametrize("operands, expected", [((20, 4), 5), ((56, 8), 7), ((100, 10), 10)])
def test_division_apply(operands, expected):
    assert Division().apply(operands) == expected


def test_division_apply_truncates_toward_zero():
    assert Division().apply((-7, 2)) == -3


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Division().apply((5, 0))


def test_division_format():
    assert Division().format((56, 8)) == "56 ÷ 8"


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_division_generate_produces_clean_division(difficulty):
    op = Division()
    for _ in range(10):
        q = op.generate(difficulty)
        dividend, divisor = q.operands
        assert dividend % divisor == 0
        assert q.answer == dividend // divisor


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_generated_questions_are_consistent(difficulty):
    for op in (Addition(), Subtraction(), Multiplication(), Division()):
        for _ in range(5):
            q = op.generate(difficulty)
            assert len(q.operands) == 2
            assert q.display == op.format(q.operands)
            assert len(q.display) > 0
            assert q.answer == op.apply(q.operands)


@pytest.mark.parametrize("difficulty", all_difficulties())
def test_scores_are_clamped(difficulty):
    for op in (Addition(), Subtraction(), Multiplication(), Division()):
        for _ in range(10):
            q = op.generate(difficulty)
            score = op.score_difficulty(q.operands, q.answer)
            assert 1.0 <= score <= 10.0