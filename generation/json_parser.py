"""
Structured (JSON) question parser — compatibility path.

Expected shape:
{
  "questions": [
    {
      "question": "...",
      "options": ["...", "..."],
      "correct_index": 0,
      "difficulty": "easy|medium|hard",
      "explanation": "..."          (optional)
    }
  ]
}
"""

import logging
from typing import Any, List

import json_repair
from pydantic import ValidationError

from generation.errors import FieldFailure, StructureFailure
from generation.json_extractor import extract_json_object
from generation.schemas import ParsedOption, ParsedQuestion, normalize_difficulty

log = logging.getLogger("generation.pipeline")

QUESTIONS_FIELD = "questions"


def _require(node: dict, key: str) -> Any:
    value = node.get(key)
    if value is None:
        raise FieldFailure(f"missing '{key}'")
    return value


def _as_index(value: Any) -> int:
    if isinstance(value, bool):
        raise FieldFailure(f"correct_index is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise FieldFailure(f"correct_index is not an integer: {value!r}")


def parse_question_node(node: Any) -> ParsedQuestion:
    """
    Build one ParsedQuestion from a single element of the questions array.

    The option at correct_index is marked correct, every other option is not.

    Raises:
        FieldFailure: missing field or wrong type
    """
    if not isinstance(node, dict):
        raise FieldFailure(f"question entry is not an object: {type(node).__name__}")

    text = _require(node, "question")
    if not isinstance(text, str):
        raise FieldFailure("'question' is not a string")

    difficulty = normalize_difficulty(str(_require(node, "difficulty")))
    explanation = node.get("explanation")
    if explanation is not None and not isinstance(explanation, str):
        explanation = str(explanation)

    raw_options = _require(node, "options")
    if not isinstance(raw_options, list):
        raise FieldFailure("'options' is not an array")
    correct_index = _as_index(_require(node, "correct_index"))

    options = [
        ParsedOption(text=str(opt), is_correct=(i == correct_index))
        for i, opt in enumerate(raw_options)
    ]

    try:
        return ParsedQuestion(
            text=text,
            difficulty=difficulty,
            explanation=explanation,
            options=options,
        )
    except ValidationError as e:
        raise FieldFailure(str(e)) from e


def parse_json_payload(payload: str) -> List[ParsedQuestion]:
    """
    Parse an already-extracted JSON object.

    A bad element is skipped; a missing or non-array 'questions' field
    fails the whole payload.

    Raises:
        StructureFailure: payload is not an object or has no questions array
    """
    data = json_repair.loads(payload)
    if not isinstance(data, dict):
        raise StructureFailure("Payload is not a JSON object")

    nodes = data.get(QUESTIONS_FIELD)
    if not isinstance(nodes, list):
        raise StructureFailure(f"Invalid JSON structure: missing '{QUESTIONS_FIELD}' array")

    questions: List[ParsedQuestion] = []
    for idx, node in enumerate(nodes):
        try:
            questions.append(parse_question_node(node))
        except FieldFailure as e:
            log.warning(f"[JSON] Skipping question #{idx + 1}: {e}")
    return questions


def parse_json_response(raw: str) -> List[ParsedQuestion]:
    """
    Extract the outer JSON object from raw model text and parse it.

    Raises:
        ExtractionFailure: no balanced object in the text
        StructureFailure:  object present but no questions array
    """
    payload = extract_json_object(raw)
    return parse_json_payload(payload)
