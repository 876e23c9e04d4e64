from generation.schemas import Difficulty, ParsedOption, ParsedQuestion
from generation.validator import is_valid_question, validate_questions


def _question(text, correct=(True, False)):
    return ParsedQuestion(
        text=text,
        difficulty=Difficulty.EASY,
        options=[ParsedOption(text=f"opt{i}", is_correct=c) for i, c in enumerate(correct)],
    )


def test_accepts_normal_question():
    assert is_valid_question(_question("What is Go?"))


def test_rejects_blank_text():
    assert not is_valid_question(_question(""))
    assert not is_valid_question(_question("  \n "))


def test_lenient_about_correct_option_count():
    assert is_valid_question(_question("none", correct=(False, False)))
    assert is_valid_question(_question("two", correct=(True, True)))


def test_validate_questions_keeps_order():
    kept = validate_questions([_question("a"), _question(" "), _question("b")])
    assert [q.text for q in kept] == ["a", "b"]
