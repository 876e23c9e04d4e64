"""
In-memory question store.

Stands in for the persistence layer: holds the topic catalog and the saved
questions, assigns ids, and filters by topic + subtopic containment.
"""

import itertools
import threading
from typing import Iterable, List, Optional, Protocol, Sequence

from generation.schemas import (
    CatalogEntry,
    ParsedQuestion,
    StoredOption,
    StoredQuestion,
)
from services.topic_resolver import find_exact, subtopic_matches


class QuestionStore(Protocol):
    def find_topic(self, name: str) -> Optional[CatalogEntry]: ...

    def all_topics(self) -> List[CatalogEntry]: ...

    def questions_for(self, topic: str, subtopic: Optional[str] = None) -> List[StoredQuestion]: ...

    def save(
        self,
        questions: Iterable[ParsedQuestion],
        topic: CatalogEntry,
        subtopic: Optional[str] = None,
    ) -> List[StoredQuestion]: ...


class InMemoryQuestionStore:
    """Thread-safe list-backed store."""

    def __init__(self, catalog: Sequence[CatalogEntry] = ()):
        self._catalog: List[CatalogEntry] = list(catalog)
        self._questions: List[StoredQuestion] = []
        self._question_ids = itertools.count(1)
        self._option_ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_topic(self, name: str) -> Optional[CatalogEntry]:
        return find_exact(name, self._catalog)

    def all_topics(self) -> List[CatalogEntry]:
        return list(self._catalog)

    def questions_for(self, topic: str, subtopic: Optional[str] = None) -> List[StoredQuestion]:
        wanted = topic.lower()
        with self._lock:
            return [
                q for q in self._questions
                if q.topic.lower() == wanted and subtopic_matches(q.subtopic, subtopic)
            ]

    def save(
        self,
        questions: Iterable[ParsedQuestion],
        topic: CatalogEntry,
        subtopic: Optional[str] = None,
    ) -> List[StoredQuestion]:
        saved: List[StoredQuestion] = []
        with self._lock:
            for q in questions:
                stored = StoredQuestion(
                    id=next(self._question_ids),
                    topic=topic.name,
                    text=q.text,
                    difficulty=q.difficulty,
                    explanation=q.explanation,
                    subtopic=subtopic if subtopic is not None else q.subtopic,
                    options=[
                        StoredOption(id=next(self._option_ids), text=o.text, is_correct=o.is_correct)
                        for o in q.options
                    ],
                )
                self._questions.append(stored)
                saved.append(stored)
        return saved
