"""In-memory question repository."""

from collections.abc import Iterable
from typing import Optional

from askbase.domain.model.question import Question
from askbase.domain.repository.question import QuestionRepository
from askbase.domain.value import QUESTION_ID_PREFIX, QuestionId, TagId

from .common import next_free_id


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository.

    Questions are frozen, so handing out the stored objects is safe; the
    containers themselves are always fresh lists.
    """

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: dict[QuestionId, Question] = {}
        for question in questions:
            self._questions[question.id] = question

    def next_id(self) -> QuestionId:
        """Reserve the identifier for the next new question."""
        return QuestionId(
            next_free_id(QUESTION_ID_PREFIX, len(self._questions), self._questions)
        )

    def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    def find_all(self) -> list[Question]:
        """Find all questions in insertion order."""
        return list(self._questions.values())

    def count_by_tag(self, tag_id: TagId) -> int:
        """Count questions tagged with the given tag."""
        return sum(1 for q in self._questions.values() if tag_id in q.tag_ids)

    def save(self, question: Question) -> Question:
        """Save or replace a question (replacing keeps its position)."""
        self._questions[question.id] = question
        return question
