"""Repository interfaces for Askbase domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from askbase.domain.repository.answer import AnswerRepository
from askbase.domain.repository.question import QuestionRepository
from askbase.domain.repository.tag import TagRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "TagRepository",
]
