"""Repository implementations."""

from askbase.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
)

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
]
