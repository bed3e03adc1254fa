"""Post answer use case."""

import logfire
from pydantic import BaseModel, Field

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.base import BaseUseCase
from askbase.domain.value import QuestionId


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    question_id: str
    text: str = Field(min_length=1)
    username: str = Field(min_length=1)


class PostAnswerResponse(BaseModel):
    """Post answer response."""

    question_id: str
    answer_id: str | None  # None when the question doesn't exist
    answer_count: int


class PostAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(self, knowledge_base: KnowledgeBase) -> None:
        """Initialize post answer use case.

        Args:
            knowledge_base: Knowledge base facade
        """
        self.knowledge_base = knowledge_base

    def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Answering an unknown question changes nothing and reports no
        answer id.

        Args:
            request: Validated answer form

        Returns:
            The new answer id and the question's answer count
        """
        question_id = QuestionId(request.question_id)
        with logfire.span("post_answer.execute", question_id=question_id):
            answer_id = self.knowledge_base.add_answer(
                question_id=question_id,
                text=request.text,
                authored_by=request.username,
            )
            question = self.knowledge_base.get_question_by_id(question_id)

            return PostAnswerResponse(
                question_id=question_id,
                answer_id=answer_id,
                answer_count=question.answer_count if question else 0,
            )
