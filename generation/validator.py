"""
Question Validator

Last gate before parsed records leave the pipeline. Intentionally weak:
text must be non-blank and difficulty must be set. Option count and
correct-option count are only reported, never enforced.
"""

import logging
from typing import Iterable, List

from generation.schemas import ParsedQuestion

log = logging.getLogger("generation.pipeline")


def is_valid_question(question: ParsedQuestion) -> bool:
    if not question.text or not question.text.strip():
        log.warning("[Validator] Question has empty text")
        return False

    if question.difficulty is None:
        log.warning("[Validator] Question has no difficulty level")
        return False

    if question.correct_count != 1:
        log.warning(
            f"[Validator] Question has {question.correct_count} correct options, accepting anyway: "
            f"{question.text[:80]!r}"
        )
    return True


def validate_questions(questions: Iterable[ParsedQuestion]) -> List[ParsedQuestion]:
    """Keep only the records that pass is_valid_question, in order."""
    return [q for q in questions if is_valid_question(q)]
