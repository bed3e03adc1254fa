"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askbase.domain.model.question import Question
from askbase.domain.value import QuestionId, TagId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def next_id(self) -> QuestionId:
        """Reserve the identifier for the next new question.

        Returns:
            An identifier not used by any stored question
        """
        pass

    @abstractmethod
    def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Question]:
        """Find all questions in insertion order.

        Returns:
            A new list of every stored question
        """
        pass

    @abstractmethod
    def count_by_tag(self, tag_id: TagId) -> int:
        """Count questions tagged with the given tag.

        Args:
            tag_id: The tag ID

        Returns:
            Number of questions referencing the tag
        """
        pass

    @abstractmethod
    def save(self, question: Question) -> Question:
        """Save a question (create or replace).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass
