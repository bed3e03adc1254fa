"""Get question use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.base import BaseUseCase
from askbase.domain.value import QuestionId
from askbase.util.clock import Clock
from askbase.util.relative_time import relative_time


class AnswerItem(BaseModel):
    """Answer shown under a question."""

    answer_id: str
    text: str
    authored_by: str
    meta: str  # e.g. "5 hours ago"


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    record_view: bool = True  # Opening the question page counts as a view


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    title: str
    text: str
    tag_names: list[str]
    authored_by: str
    meta: str
    view_count: int
    answer_count: int
    answers: list[AnswerItem]  # Newest first


class GetQuestionUseCase(BaseUseCase):
    """Use case for opening a question with its answers."""

    def __init__(self, knowledge_base: KnowledgeBase, clock: Clock) -> None:
        """Initialize get question use case.

        Args:
            knowledge_base: Knowledge base facade
            clock: Reference time for relative dates
        """
        self.knowledge_base = knowledge_base
        self.clock = clock

    def execute(self, request: GetQuestionRequest) -> Optional[GetQuestionResponse]:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Question details if found, None otherwise
        """
        question_id = QuestionId(request.question_id)
        with logfire.span("get_question.execute", question_id=question_id):
            if request.record_view:
                question = self.knowledge_base.record_view(question_id)
            else:
                question = self.knowledge_base.get_question_by_id(question_id)

            if question is None:
                return None

            now = self.clock.now()
            answers = [
                AnswerItem(
                    answer_id=answer.id,
                    text=answer.text,
                    authored_by=answer.authored_by,
                    meta=relative_time(answer.posted_at, now),
                )
                for answer in self.knowledge_base.get_question_answers(question)
            ]

            return GetQuestionResponse(
                question_id=question.id,
                title=question.title,
                text=question.text,
                tag_names=self.knowledge_base.get_tag_names(question),
                authored_by=question.authored_by,
                meta=relative_time(question.asked_at, now),
                view_count=question.view_count,
                answer_count=question.answer_count,
                answers=answers,
            )
