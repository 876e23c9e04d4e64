"""
Quiz Master — generator backends

One capability: generate N questions for a topic while steering away from
questions that already exist. Backends are swapped by configuration:

  QUIZ_MASTER_BACKEND=llm   → LLMQuizMaster (default)
  QUIZ_MASTER_BACKEND=stub  → StubQuizMaster (always returns nothing)
"""

import logging
import math
import os
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from generation.llm_client import call_llm
from generation.response_router import parse_response
from generation.schemas import ParsedQuestion

log = logging.getLogger("generation.pipeline")

QUIZ_MASTER_BACKEND = os.getenv("QUIZ_MASTER_BACKEND", "llm")

# Only this many existing questions are quoted back to the model
MAX_EXCLUSION_HINTS = 10


class QuizMaster(Protocol):
    def generate_questions(
        self,
        topic: str,
        count: int,
        existing_question_texts: Sequence[str],
    ) -> List[ParsedQuestion]:
        ...


class StubQuizMaster:
    """Offline backend: produces no questions."""

    def generate_questions(
        self,
        topic: str,
        count: int,
        existing_question_texts: Sequence[str],
    ) -> List[ParsedQuestion]:
        log.info(f"[Stub] Skipping generation of {count} questions for '{topic}'")
        return []


# ─── Prompt ────────────────────────────────────────────────────────────────────

QUIZ_PROMPT = """You are a quiz master specialized in coding topics.
Generate {count} multiple-choice quiz questions about: {topic}

Requirements:
- Generate exactly {easy} easy, {medium} medium, and {hard} hard questions
- Each question must have exactly 4 options
- Exactly one option must be correct
- Create factual, verifiable questions (no opinions or ambiguous questions)
- Include explanations for each question
- Make the incorrect options plausible distractors
- ENCOURAGED: Include code snippets in questions, written as markdown code blocks
{exclusions}
OUTPUT FORMAT — use EXACTLY this plain-text format, no JSON:

### QUESTION 1 ###
DIFFICULTY: easy
QUESTION: What does this method return?
```java
public int add(int a, int b) {{
  return a + b;
}}
add(2, 3)
```
OPTION: 5 [CORRECT]
OPTION: 23
OPTION: Error
OPTION: null
EXPLANATION: The method adds two integers.

RULES:
1. Start every question with a "### QUESTION <n> ###" line
2. Put each option on its own line starting with "OPTION:"
3. Mark the single correct option by appending [CORRECT]
4. Code goes on its own lines directly after the QUESTION line; no escaping needed
5. Do not add any text before the first question or after the last one
"""


def difficulty_split(count: int) -> Tuple[int, int, int]:
    """40% easy and 20% hard (both rounded up), the rest medium."""
    easy = math.ceil(count * 0.4)
    hard = math.ceil(count * 0.2)
    medium = count - easy - hard
    if medium < 0:
        # tiny counts: rounding up overshoots, take it back from hard
        hard = max(0, hard + medium)
        medium = 0
    return easy, medium, hard


def build_prompt(topic: str, count: int, existing_question_texts: Sequence[str] = ()) -> str:
    easy, medium, hard = difficulty_split(count)

    exclusions = ""
    if existing_question_texts:
        lines = [f"- {t}" for t in list(existing_question_texts)[:MAX_EXCLUSION_HINTS]]
        exclusions = (
            "\nIMPORTANT: Avoid generating questions similar to these existing ones:\n"
            + "\n".join(lines)
            + "\n"
        )

    return QUIZ_PROMPT.format(
        count=count,
        topic=topic,
        easy=easy,
        medium=medium,
        hard=hard,
        exclusions=exclusions,
    )


class LLMQuizMaster:
    """Model-backed generator. Any failure of the call yields no questions."""

    def __init__(self, llm: Optional[Callable[[str], str]] = None):
        self._llm = llm or call_llm

    def generate_questions(
        self,
        topic: str,
        count: int,
        existing_question_texts: Sequence[str],
    ) -> List[ParsedQuestion]:
        log.info(f"[QuizMaster] Generating {count} questions for topic: {topic}")
        prompt = build_prompt(topic, count, existing_question_texts)

        try:
            raw = self._llm(prompt)
        except Exception:
            log.exception("[QuizMaster] LLM call failed")
            return []

        log.debug(f"[QuizMaster] LLM response received: {raw}")
        return parse_response(raw)


def get_quiz_master(backend: Optional[str] = None) -> QuizMaster:
    """Pick a backend by name, defaulting to QUIZ_MASTER_BACKEND."""
    name = (backend or QUIZ_MASTER_BACKEND).strip().lower()
    if name == "stub":
        return StubQuizMaster()
    if name == "llm":
        return LLMQuizMaster()
    raise ValueError(f"Unknown QUIZ_MASTER_BACKEND '{name}'. Expected 'llm' or 'stub'.")
