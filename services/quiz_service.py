"""
Quiz assembly.

get_quiz():
  1. Resolve the user's text to a topic (+ subtopic)
  2. Fetch stored questions, drop the ids the user has already seen
  3. Short of QUIZ_SIZE? ask the quiz master for the shortfall, tag + save them
  4. Shuffle and cap at QUIZ_SIZE
"""

import logging
import os
import random
from typing import Iterable, List, Optional

from generation.quiz_master import QuizMaster
from generation.schemas import OptionOut, QuestionOut, QuizOut, StoredQuestion
from services.question_store import QuestionStore
from services.topic_resolver import resolve_topic

log = logging.getLogger(__name__)

QUIZ_SIZE = int(os.getenv("QUIZ_SIZE", "5"))


def to_question_out(question: StoredQuestion) -> QuestionOut:
    return QuestionOut(
        id=question.id,
        text=question.text,
        difficulty=question.difficulty.value,
        explanation=question.explanation,
        options=[OptionOut(id=o.id, text=o.text, is_correct=o.is_correct) for o in question.options],
    )


class QuizService:
    def __init__(
        self,
        store: QuestionStore,
        quiz_master: QuizMaster,
        quiz_size: int = QUIZ_SIZE,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.quiz_master = quiz_master
        self.quiz_size = quiz_size
        self.rng = rng or random.Random()

    def get_quiz(self, user_input: str, exclude_question_ids: Optional[Iterable[int]] = None) -> QuizOut:
        """
        Build a quiz for free-text user input.

        Raises:
            TopicNotFound: the input does not resolve to a catalog topic
        """
        excluded = set(exclude_question_ids or [])
        log.info(f"[Quiz] get_quiz topic='{user_input}' exclude={sorted(excluded)}")

        resolved = resolve_topic(user_input, self.store.all_topics())
        topic, subtopic = resolved.topic, resolved.subtopic

        all_questions = self.store.questions_for(topic.name, subtopic)
        available = [q for q in all_questions if q.id not in excluded]
        log.info(f"[Quiz] Found {len(all_questions)} questions, {len(available)} available")

        if len(available) < self.quiz_size:
            # Every known text (excluded ones too) so the generator avoids repeats
            existing_texts = [q.text for q in all_questions]
            needed = self.quiz_size - len(available)
            log.info(
                f"[Quiz] Requesting {needed} new questions, "
                f"passing {len(existing_texts)} existing texts as exclusions"
            )

            generated = self.quiz_master.generate_questions(user_input, needed, existing_texts)
            if generated:
                self.store.save(generated, topic, subtopic)
                all_questions = self.store.questions_for(topic.name, subtopic)
                available = [q for q in all_questions if q.id not in excluded]

        selected: List[StoredQuestion] = available
        if len(available) > self.quiz_size:
            selected = self.rng.sample(available, self.quiz_size)

        questions = [to_question_out(q) for q in selected]
        return QuizOut(topic=user_input, total_questions=len(questions), questions=questions)
