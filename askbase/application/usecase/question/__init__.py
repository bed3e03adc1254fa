"""Question use cases."""

from .ask_question import AskQuestionRequest, AskQuestionResponse, AskQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PageNavigation,
)

__all__ = [
    "AskQuestionRequest",
    "AskQuestionResponse",
    "AskQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PageNavigation",
]
