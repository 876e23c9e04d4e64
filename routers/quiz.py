"""
Quiz Router — /quiz

Endpoints:
  GET /quiz/{topic}   — up to QUIZ_SIZE questions for a free-text topic,
                        generating new ones when the store runs short
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from generation.errors import TopicNotFound
from generation.quiz_master import get_quiz_master
from generation.schemas import QuizOut
from services.catalog import load_catalog
from services.question_store import InMemoryQuestionStore
from services.quiz_service import QuizService

router = APIRouter(prefix="/quiz", tags=["quiz"])

log = logging.getLogger(__name__)

# Lazy singleton
_service: QuizService | None = None


def get_quiz_service() -> QuizService:
    global _service
    if _service is None:
        _service = QuizService(
            store=InMemoryQuestionStore(load_catalog()),
            quiz_master=get_quiz_master(),
        )
    return _service


@router.get("/{topic}", response_model=QuizOut)
def get_quiz(
    topic: str,
    exclude_question_ids: Optional[List[int]] = Query(None),
    service: QuizService = Depends(get_quiz_service),
):
    """
    Get a quiz for a topic, e.g. `Java`, `Java records`, `react hooks`.

    Pass `exclude_question_ids` (repeatable) to skip questions already seen.
    """
    try:
        return service.get_quiz(topic, exclude_question_ids)
    except TopicNotFound as e:
        log.info(f"[QUIZ] {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
