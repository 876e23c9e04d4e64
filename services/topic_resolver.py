"""
Topic resolution — free-text query → catalog topic + optional subtopic.

Strategies, first success wins:
  1. exact token      — any whitespace token equals a topic name (case-insensitive);
                        the remaining tokens become the subtopic
  2. whole-input fuzzy — query contains a topic name or vice versa; no subtopic
  3. first-token fuzzy — same containment test on the first token only;
                        tokens 2..N become the subtopic

Fuzzy ties go to the catalog's own order, there is no similarity scoring.

Examples:
  "Java records"   → Java, subtopic "records"
  "React hooks"    → React, subtopic "hooks"
  "Java"           → Java, no subtopic
"""

import logging
from typing import Callable, List, Optional, Sequence

from generation.errors import TopicNotFound
from generation.schemas import CatalogEntry, ResolvedTopic

log = logging.getLogger(__name__)

Strategy = Callable[[str, List[str], Sequence[CatalogEntry]], Optional[ResolvedTopic]]


def _join(tokens: List[str]) -> Optional[str]:
    return " ".join(tokens) or None


def find_exact(name: str, catalog: Sequence[CatalogEntry]) -> Optional[CatalogEntry]:
    wanted = name.lower()
    for entry in catalog:
        if entry.name.lower() == wanted:
            return entry
    return None


def find_fuzzy(text: str, catalog: Sequence[CatalogEntry]) -> Optional[CatalogEntry]:
    """First entry whose name contains, or is contained in, the text."""
    lowered = text.lower()
    for entry in catalog:
        name = entry.name.lower()
        if name in lowered or lowered in name:
            return entry
    return None


def match_exact_token(
    query: str, tokens: List[str], catalog: Sequence[CatalogEntry]
) -> Optional[ResolvedTopic]:
    for i, token in enumerate(tokens):
        entry = find_exact(token, catalog)
        if entry is not None:
            return ResolvedTopic(topic=entry, subtopic=_join(tokens[:i] + tokens[i + 1:]))
    return None


def match_whole_input(
    query: str, tokens: List[str], catalog: Sequence[CatalogEntry]
) -> Optional[ResolvedTopic]:
    entry = find_fuzzy(query, catalog)
    if entry is None:
        return None
    return ResolvedTopic(topic=entry, subtopic=None)


def match_first_token(
    query: str, tokens: List[str], catalog: Sequence[CatalogEntry]
) -> Optional[ResolvedTopic]:
    if len(tokens) <= 1:
        return None
    entry = find_fuzzy(tokens[0], catalog)
    if entry is None:
        return None
    return ResolvedTopic(topic=entry, subtopic=_join(tokens[1:]))


STRATEGIES: List[Strategy] = [match_exact_token, match_whole_input, match_first_token]


def resolve_topic(query: str, catalog: Sequence[CatalogEntry]) -> ResolvedTopic:
    """
    Resolve a user query against the catalog.

    Raises:
        TopicNotFound: blank query, or no strategy matched
    """
    normalized = (query or "").strip()
    if not normalized:
        raise TopicNotFound(query or "")

    tokens = normalized.split()
    for strategy in STRATEGIES:
        resolved = strategy(normalized, tokens, catalog)
        if resolved is not None:
            log.info(
                f"[Resolver] '{normalized}' → topic={resolved.topic.name} "
                f"subtopic={resolved.subtopic!r} via {strategy.__name__}"
            )
            return resolved

    log.info(f"[Resolver] No topic matched '{normalized}'")
    raise TopicNotFound(normalized)


def subtopic_matches(stored: Optional[str], wanted: Optional[str]) -> bool:
    """Case-insensitive containment: 'record' matches a stored 'records'."""
    if not wanted:
        return True
    if not stored:
        return False
    return wanted.lower() in stored.lower()
