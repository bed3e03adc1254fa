"""Domain value objects for Askbase."""

from askbase.domain.value.identifiers import (
    ANSWER_ID_PREFIX,
    QUESTION_ID_PREFIX,
    TAG_ID_PREFIX,
    AnswerId,
    QuestionId,
    TagId,
)
from askbase.domain.value.types import QuestionOrder, SearchQuery

__all__ = [
    # Identifiers
    "QuestionId",
    "AnswerId",
    "TagId",
    "QUESTION_ID_PREFIX",
    "ANSWER_ID_PREFIX",
    "TAG_ID_PREFIX",
    # Types
    "QuestionOrder",
    "SearchQuery",
]
