"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from askbase.domain.model.answer import Answer
from askbase.domain.value import AnswerId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    def next_id(self) -> AnswerId:
        """Reserve the identifier for the next new answer."""
        pass

    @abstractmethod
    def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_ids(self, answer_ids: Iterable[AnswerId]) -> list[Answer]:
        """Find several answers in a single call.

        Args:
            answer_ids: Answer identifiers

        Returns:
            Found answers in storage order (unknown ids are skipped)
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Answer]:
        """Find all answers in insertion order."""
        pass

    @abstractmethod
    def save(self, answer: Answer) -> Answer:
        """Save an answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass
