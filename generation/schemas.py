"""
Pydantic schemas for the question ingestion pipeline.

Internal pipeline types:   ParsedOption, ParsedQuestion
Catalog types:             CatalogEntry, ResolvedTopic
Stored / API types:        StoredQuestion, OptionOut, QuestionOut, QuizOut
"""

import enum
import logging
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

log = logging.getLogger("generation.pipeline")


class Difficulty(str, enum.Enum):
    """Difficulty levels accepted from the generator."""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


def normalize_difficulty(label: Optional[str]) -> Difficulty:
    """
    Map a free-text difficulty label onto Difficulty.

    Case-folded and trimmed; anything unrecognised falls back to MEDIUM
    with a warning instead of failing the record.
    """
    value = (label or "").strip().lower()
    if value == "easy":
        return Difficulty.EASY
    if value == "medium":
        return Difficulty.MEDIUM
    if value == "hard":
        return Difficulty.HARD
    log.warning(f"[Difficulty] Unknown difficulty: '{value}', defaulting to MEDIUM")
    return Difficulty.MEDIUM


# ─── Internal pipeline types ───────────────────────────────────────────────────

class ParsedOption(BaseModel):
    """One answer option."""
    text: str
    is_correct: bool = False


class ParsedQuestion(BaseModel):
    """One question recovered from a raw model response."""
    text: str
    difficulty: Difficulty = Difficulty.MEDIUM
    explanation: Optional[str] = None
    options: List[ParsedOption]
    subtopic: Optional[str] = None   # tagged by the quiz service, never by the parsers

    @field_validator("options")
    @classmethod
    def _options_not_empty(cls, value: List[ParsedOption]) -> List[ParsedOption]:
        if not value:
            raise ValueError("question has no options")
        return value

    @property
    def correct_count(self) -> int:
        return sum(1 for o in self.options if o.is_correct)


# ─── Catalog types ─────────────────────────────────────────────────────────────

class CatalogEntry(BaseModel):
    """A known topic. Names are unique case-insensitively."""
    name: str
    category: str = ""


class ResolvedTopic(BaseModel):
    topic: CatalogEntry
    subtopic: Optional[str] = None


# ─── Stored / API types ────────────────────────────────────────────────────────

class StoredOption(ParsedOption):
    id: int


class StoredQuestion(ParsedQuestion):
    """A ParsedQuestion after it has been saved under a topic."""
    id: int
    topic: str
    options: List[StoredOption]


class OptionOut(BaseModel):
    id: int
    text: str
    is_correct: bool


class QuestionOut(BaseModel):
    id: int
    text: str
    difficulty: str
    explanation: Optional[str] = None
    options: List[OptionOut] = Field(default_factory=list)


class QuizOut(BaseModel):
    """Quiz returned to the client."""
    topic: str
    total_questions: int
    questions: List[QuestionOut] = Field(default_factory=list)
