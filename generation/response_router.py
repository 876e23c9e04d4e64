"""
Format Router

Chooses how to read a raw model response:
  1. Delimited blocks, when the text contains "### QUESTION"
  2. JSON extraction, as the fallback (or directly when the marker is absent)

Strategies are tried in order until one yields at least one valid record.
The router never raises: an unusable response gives an empty list.
"""

import logging
from typing import Callable, List, Tuple

from generation.delimited_parser import DELIMITER_MARKER, parse_delimited
from generation.errors import IngestionError
from generation.json_parser import parse_json_response
from generation.schemas import ParsedQuestion
from generation.validator import validate_questions

log = logging.getLogger("generation.pipeline")

ParseStrategy = Callable[[str], List[ParsedQuestion]]


def _strategies_for(raw: str) -> List[Tuple[str, ParseStrategy]]:
    strategies: List[Tuple[str, ParseStrategy]] = []
    if DELIMITER_MARKER in raw:
        strategies.append(("delimited", parse_delimited))
    strategies.append(("json", parse_json_response))
    return strategies


def parse_response(raw: str) -> List[ParsedQuestion]:
    """
    Turn one raw model response into validated questions.

    Returns:
        Validated questions in source order; empty if nothing usable was found
    """
    if not raw:
        log.error("[Router] Empty response from generator")
        return []

    log.debug(f"[Router] Raw response length: {len(raw)} chars")

    for name, strategy in _strategies_for(raw):
        try:
            questions = validate_questions(strategy(raw))
        except IngestionError as e:
            log.error(f"[Router] {name} parse failed: {e}. First 200 chars: {raw[:200]}")
            continue
        except Exception:
            log.exception(f"[Router] {name} parser crashed")
            continue

        if questions:
            log.info(f"[Router] Successfully parsed {len(questions)} valid questions ({name})")
            return questions
        log.warning(f"[Router] {name} parse yielded no valid questions")

    return []
