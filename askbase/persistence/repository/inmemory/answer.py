"""In-memory answer repository."""

from collections.abc import Iterable
from typing import Optional

from askbase.domain.model.answer import Answer
from askbase.domain.repository.answer import AnswerRepository
from askbase.domain.value import ANSWER_ID_PREFIX, AnswerId

from .common import next_free_id


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository."""

    def __init__(self, answers: Iterable[Answer] = ()) -> None:
        self._answers: dict[AnswerId, Answer] = {}
        for answer in answers:
            self._answers[answer.id] = answer

    def next_id(self) -> AnswerId:
        """Reserve the identifier for the next new answer."""
        return AnswerId(
            next_free_id(ANSWER_ID_PREFIX, len(self._answers), self._answers)
        )

    def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    def find_by_ids(self, answer_ids: Iterable[AnswerId]) -> list[Answer]:
        """Find several answers, skipping unknown ids."""
        wanted = set(answer_ids)
        return [a for a in self._answers.values() if a.id in wanted]

    def find_all(self) -> list[Answer]:
        """Find all answers in insertion order."""
        return list(self._answers.values())

    def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer
