"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .ordering import sort_questions
from .question_service import DEFAULT_PAGE_SIZE, QuestionPage, QuestionService
from .search import matches_question
from .tag_service import TagService

__all__ = [
    "AnswerService",
    "DEFAULT_PAGE_SIZE",
    "QuestionPage",
    "QuestionService",
    "Service",
    "TagService",
    "matches_question",
    "sort_questions",
]
