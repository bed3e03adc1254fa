"""Ask question use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field, field_validator

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.base import BaseUseCase

MAX_TITLE_LENGTH = 100
MAX_TAGS = 5
MAX_TAG_LENGTH = 20


class AskQuestionRequest(BaseModel):
    """Ask question request.

    Tags may be given as a list or as one whitespace-separated string,
    the way they are typed into the form.
    """

    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    text: str = Field(min_length=1)
    tag_names: list[str] = Field(min_length=1, max_length=MAX_TAGS)
    username: str = Field(min_length=1)

    @field_validator("tag_names", mode="before")
    @classmethod
    def split_tag_names(cls, v: object) -> object:
        """Split a tag string on whitespace and drop empty entries."""
        if isinstance(v, str):
            return v.split()
        if isinstance(v, list):
            return [t for t in v if not isinstance(t, str) or t.strip()]
        return v

    @field_validator("tag_names")
    @classmethod
    def validate_tag_length(cls, v: list[str]) -> list[str]:
        """Each tag is limited to MAX_TAG_LENGTH characters."""
        if any(len(tag) > MAX_TAG_LENGTH for tag in v):
            raise ValueError(f"Tag length cannot be more than {MAX_TAG_LENGTH}")
        return v


class AskQuestionResponse(BaseModel):
    """Ask question response."""

    question_id: str
    title: str
    tag_names: list[str]
    asked_at: datetime


class AskQuestionUseCase(BaseUseCase):
    """Use case for posting a new question."""

    def __init__(self, knowledge_base: KnowledgeBase) -> None:
        """Initialize ask question use case.

        Args:
            knowledge_base: Knowledge base facade
        """
        self.knowledge_base = knowledge_base

    def execute(self, request: AskQuestionRequest) -> AskQuestionResponse:
        """Execute ask question flow.

        Args:
            request: Validated question form

        Returns:
            The created question
        """
        with logfire.span(
            "ask_question.execute", title=request.title, tags=request.tag_names
        ):
            question_id = self.knowledge_base.add_question(
                title=request.title,
                text=request.text,
                tag_names=request.tag_names,
                authored_by=request.username,
            )
            question = self.knowledge_base.get_question(question_id)

            logfire.info("Question asked", question_id=question_id)
            return AskQuestionResponse(
                question_id=question.id,
                title=question.title,
                tag_names=self.knowledge_base.get_tag_names(question),
                asked_at=question.asked_at,
            )
