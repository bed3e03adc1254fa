"""Domain model entities for Askbase."""

from askbase.domain.model.answer import Answer
from askbase.domain.model.question import Question
from askbase.domain.model.tag import Tag

__all__ = [
    "Tag",
    "Answer",
    "Question",
]
