"""
Delimited-block parser — primary wire format.

Each question is a block introduced by a "### QUESTION n ###" heading and
made of prefixed lines:

    ### QUESTION 1 ###
    DIFFICULTY: easy
    QUESTION: What does this print?
    ```python
    print({"a": 1})
    ```
    OPTION: {'a': 1} [CORRECT]
    OPTION: Error
    EXPLANATION: Dict literals print with single quotes.

Unprefixed lines continue the active QUESTION or EXPLANATION field verbatim,
so fenced code survives without any escaping. The number in the heading is
only a separator.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import ValidationError

from generation.errors import FieldFailure
from generation.schemas import ParsedOption, ParsedQuestion, normalize_difficulty

log = logging.getLogger("generation.pipeline")

DELIMITER_MARKER = "### QUESTION"
CORRECT_MARKER = "[CORRECT]"

BLOCK_HEADING_RE = re.compile(r"^[ \t]*###[ \t]*QUESTION[ \t]+\d+[ \t]*###[ \t]*$", re.MULTILINE)

_DIFFICULTY = "DIFFICULTY:"
_QUESTION = "QUESTION:"
_OPTION = "OPTION:"
_EXPLANATION = "EXPLANATION:"


@dataclass
class _BlockState:
    """Scratch state for one block."""
    active: Optional[str] = None          # "difficulty" | "question" | "option" | "explanation"
    difficulty: Optional[str] = None
    question_lines: List[str] = field(default_factory=list)
    explanation_lines: List[str] = field(default_factory=list)
    options: List[ParsedOption] = field(default_factory=list)

    def start(self, target: List[str], remainder: str) -> None:
        target.clear()
        if remainder:
            target.append(remainder)


def _parse_option(remainder: str) -> ParsedOption:
    is_correct = CORRECT_MARKER in remainder
    if is_correct:
        remainder = remainder.replace(CORRECT_MARKER, "")
    return ParsedOption(text=remainder.strip(), is_correct=is_correct)


def split_blocks(raw: str) -> List[str]:
    """Split on QUESTION headings; text before the first heading is dropped."""
    text = (raw or "").replace("\r\n", "\n").replace("\r", "\n")
    parts = BLOCK_HEADING_RE.split(text)
    return parts[1:]


def parse_block(block: str) -> ParsedQuestion:
    """
    Run the line-prefix state machine over one block.

    Raises:
        FieldFailure: no DIFFICULTY line, empty question text, or no options
    """
    state = _BlockState()

    for line in block.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(_DIFFICULTY):
            state.active = "difficulty"
            state.difficulty = stripped[len(_DIFFICULTY):].strip().lower()
        elif stripped.startswith(_QUESTION):
            state.active = "question"
            state.start(state.question_lines, stripped[len(_QUESTION):].strip())
        elif stripped.startswith(_OPTION):
            state.active = "option"
            state.options.append(_parse_option(stripped[len(_OPTION):]))
        elif stripped.startswith(_EXPLANATION):
            state.active = "explanation"
            state.start(state.explanation_lines, stripped[len(_EXPLANATION):].strip())
        elif state.active == "question":
            state.question_lines.append(line)
        elif state.active == "explanation":
            state.explanation_lines.append(line)
        # anything else (stray text after DIFFICULTY/OPTION, preamble) is ignored

    if not state.difficulty:
        raise FieldFailure("missing DIFFICULTY")
    text = "\n".join(state.question_lines)
    if not text.strip():
        raise FieldFailure("missing QUESTION")
    if not state.options:
        raise FieldFailure("no OPTION lines")

    explanation = "\n".join(state.explanation_lines) or None
    try:
        return ParsedQuestion(
            text=text,
            difficulty=normalize_difficulty(state.difficulty),
            explanation=explanation,
            options=state.options,
        )
    except ValidationError as e:
        raise FieldFailure(str(e)) from e


def parse_delimited(raw: str) -> List[ParsedQuestion]:
    """Parse every block in textual order; malformed blocks are skipped."""
    questions: List[ParsedQuestion] = []
    for idx, block in enumerate(split_blocks(raw), start=1):
        try:
            questions.append(parse_block(block))
        except FieldFailure as e:
            log.warning(f"[Delimited] Skipping block {idx}: {e}")
    log.info(f"[Delimited] Parsed {len(questions)} question(s)")
    return questions
