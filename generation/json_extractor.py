"""
Brace-balanced JSON extraction.

Finds the first complete JSON object inside arbitrary model output. The scan
tracks string and escape state, so braces inside string values (code
snippets such as `if (x) { ... }`) never close the object early.
"""

import logging

from generation.errors import ExtractionFailure

log = logging.getLogger("generation.pipeline")

_FENCE = "```"
_JSON_FENCE = "```json"


def strip_code_fence(raw: str) -> str:
    """Remove one leading ```json / ``` fence and one trailing ``` fence."""
    cleaned = raw.strip()
    if cleaned.startswith(_JSON_FENCE):
        cleaned = cleaned[len(_JSON_FENCE):]
    elif cleaned.startswith(_FENCE):
        cleaned = cleaned[len(_FENCE):]
    if cleaned.endswith(_FENCE):
        cleaned = cleaned[: -len(_FENCE)]
    return cleaned.strip()


def extract_json_object(raw: str) -> str:
    """
    Return the span from the first '{' to its matching '}' inclusive.

    Raises:
        ExtractionFailure: empty input, no '{', or the object never closes
    """
    if not raw:
        raise ExtractionFailure("Empty response")

    cleaned = strip_code_fence(raw)
    start = cleaned.find("{")
    if start == -1:
        raise ExtractionFailure(f"No JSON object found: {cleaned[:200]}")

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(cleaned)):
        ch = cleaned[i]
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return cleaned[start : i + 1]

    raise ExtractionFailure(f"Unbalanced braces (depth {depth} at end of input)")
