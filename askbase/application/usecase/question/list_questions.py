"""List questions use case."""

from collections.abc import Mapping
from typing import Any

import logfire
from pydantic import BaseModel, Field, ValidationError, field_validator

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.base import BaseUseCase
from askbase.domain.value import QuestionOrder
from askbase.util.clock import Clock
from askbase.util.relative_time import relative_time


class QuestionListItem(BaseModel):
    """Question summary in a listing."""

    question_id: str
    title: str
    tag_names: list[str]
    authored_by: str
    meta: str  # e.g. "Mar 04 at 09:15"
    answer_count: int
    view_count: int


class PageNavigation(BaseModel):
    """Index arithmetic for next/previous page links."""

    next_index: int  # Wraps to 0 after the last page
    prev_index: int | None  # None on the first page
    is_first_page: bool
    is_last_page: bool

    @classmethod
    def for_page(cls, start_index: int, total: int, page_size: int) -> "PageNavigation":
        next_index = start_index + page_size
        if next_index >= total:
            next_index = 0
        return cls(
            next_index=next_index,
            prev_index=max(start_index - page_size, 0) if start_index > 0 else None,
            is_first_page=start_index == 0,
            is_last_page=start_index + page_size >= total,
        )


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    start_index: int = Field(default=0, ge=0)
    order: QuestionOrder = QuestionOrder.NEWEST
    search: str = ""

    @field_validator("search", mode="before")
    @classmethod
    def default_search(cls, v: object) -> object:
        """A missing search means no filtering."""
        return "" if v is None else v

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ListQuestionsRequest":
        """Build a request from raw presentation inputs.

        Order names are resolved leniently (unknown names mean newest).
        """
        values = dict(params)
        if "order" in values and not isinstance(values["order"], QuestionOrder):
            values["order"] = QuestionOrder.from_name(values["order"])
        return cls.model_validate(values)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    start_index: int
    order: QuestionOrder
    search: str
    navigation: PageNavigation

    @classmethod
    def empty(cls) -> "ListQuestionsResponse":
        """Listing with nothing in it."""
        return cls(
            questions=[],
            total=0,
            start_index=0,
            order=QuestionOrder.NEWEST,
            search="",
            navigation=PageNavigation.for_page(0, 0, 1),
        )


class ListQuestionsUseCase(BaseUseCase):
    """Use case for the filtered, paginated question listing."""

    def __init__(self, knowledge_base: KnowledgeBase, clock: Clock) -> None:
        """Initialize list questions use case.

        Args:
            knowledge_base: Knowledge base facade
            clock: Reference time for relative dates
        """
        self.knowledge_base = knowledge_base
        self.clock = clock

    def execute(
        self, request: ListQuestionsRequest | Mapping[str, Any]
    ) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raw parameters that cannot be turned into a valid request produce
        an empty listing instead of an error.

        Args:
            request: Request model, or raw parameters to validate

        Returns:
            One page of questions plus navigation
        """
        if not isinstance(request, ListQuestionsRequest):
            try:
                request = ListQuestionsRequest.from_params(request)
            except (ValidationError, TypeError, ValueError) as e:
                logfire.error("Invalid question listing parameters", error=str(e))
                return ListQuestionsResponse.empty()

        with logfire.span(
            "list_questions.execute",
            start_index=request.start_index,
            order=request.order.value,
            search=request.search,
        ):
            page = self.knowledge_base.get_questions_by_filter(
                start_index=request.start_index,
                order=request.order,
                search=request.search,
            )

            now = self.clock.now()
            items = [
                QuestionListItem(
                    question_id=question.id,
                    title=question.title,
                    tag_names=self.knowledge_base.get_tag_names(question),
                    authored_by=question.authored_by,
                    meta=relative_time(question.asked_at, now),
                    answer_count=question.answer_count,
                    view_count=question.view_count,
                )
                for question in page.questions
            ]

            logfire.info("Questions listed", count=len(items), total=page.total)

            return ListQuestionsResponse(
                questions=items,
                total=page.total,
                start_index=request.start_index,
                order=request.order,
                search=request.search,
                navigation=PageNavigation.for_page(
                    request.start_index, page.total, page.page_size
                ),
            )
