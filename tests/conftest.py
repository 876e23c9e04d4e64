import pytest

from generation.schemas import CatalogEntry, Difficulty, ParsedOption, ParsedQuestion


@pytest.fixture
def catalog():
    return [
        CatalogEntry(name="Java", category="backend"),
        CatalogEntry(name="Python", category="backend"),
        CatalogEntry(name="JavaScript", category="frontend"),
        CatalogEntry(name="React", category="frontend"),
        CatalogEntry(name="React Native", category="mobile"),
    ]


def make_question(text, difficulty=Difficulty.EASY, subtopic=None):
    return ParsedQuestion(
        text=text,
        difficulty=difficulty,
        subtopic=subtopic,
        options=[
            ParsedOption(text="right", is_correct=True),
            ParsedOption(text="wrong", is_correct=False),
        ],
    )
