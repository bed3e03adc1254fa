"""Question domain service."""

from collections.abc import Iterable

import logfire

from askbase.domain.error import NotFoundError
from askbase.domain.model.question import Question
from askbase.domain.repository.question import QuestionRepository
from askbase.domain.value import QuestionId, QuestionOrder, SearchQuery, TagId
from askbase.domain.value.common import ValueObject
from askbase.util.clock import Clock

from .base import Service
from .ordering import sort_questions
from .search import matches_question
from .tag_service import TagService

DEFAULT_PAGE_SIZE = 5


class QuestionPage(ValueObject):
    """One page of a filtered question listing."""

    questions: tuple[Question, ...]
    total: int  # Matching questions across all pages
    start_index: int
    page_size: int


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        tag_service: TagService,
        clock: Clock,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service (resolves tag names)
            clock: Source of asked_at timestamps
            page_size: Questions per page in filtered listings
        """
        self.question_repository = question_repository
        self.tag_service = tag_service
        self.clock = clock
        self.page_size = page_size

    def ask_question(
        self, title: str, text: str, tag_names: Iterable[str], authored_by: str
    ) -> Question:
        """Create a new question.

        Tag names are resolved to existing tags or created on first use.

        Args:
            title: Question title
            text: Question body
            tag_names: Tag names in display order
            authored_by: Author username

        Returns:
            The saved question
        """
        tag_names = list(tag_names)
        with logfire.span(
            "question_service.ask_question", title=title, tags=tag_names
        ):
            tag_ids = self.tag_service.resolve_names(tag_names)
            question = Question(
                id=self.question_repository.next_id(),
                title=title,
                text=text,
                tag_ids=tuple(tag_ids),
                authored_by=authored_by,
                asked_at=self.clock.now(),
            )
            saved = self.question_repository.save(question)
            logfire.info("Question created", question_id=saved.id)
            return saved

    def get_question_by_id(self, question_id: QuestionId | None) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID (None is treated as unknown)

        Returns:
            Question if found, None otherwise
        """
        if question_id is None:
            return None
        return self.question_repository.find_by_id(question_id)

    def get_by_id(self, question_id: QuestionId) -> Question:
        """Get a question that must exist.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = self.question_repository.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        return question

    def get_all_questions(self) -> list[Question]:
        """Get every question in creation order."""
        return self.question_repository.find_all()

    def record_view(self, question_id: QuestionId) -> Question | None:
        """Count one view of a question.

        Args:
            question_id: Question ID

        Returns:
            Updated question, or None if the question doesn't exist
        """
        with logfire.span("question_service.record_view", question_id=question_id):
            question = self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found for view", question_id=question_id)
                return None

            saved = self.question_repository.save(question.with_view())
            logfire.info(
                "Question viewed", question_id=question_id, views=saved.view_count
            )
            return saved

    def count_by_tag(self, tag_id: TagId) -> int:
        """Count questions carrying a tag."""
        return self.question_repository.count_by_tag(tag_id)

    def filter_questions(self, search: str | None) -> list[Question]:
        """Select questions matching a search string.

        Args:
            search: Free text with optional bracketed tag terms

        Returns:
            Matching questions in creation order
        """
        query = SearchQuery.parse(search)
        questions = self.question_repository.find_all()
        if query.is_empty:
            return questions

        tag_names = {tag.id: tag.name for tag in self.tag_service.get_all_tags()}
        return [
            q
            for q in questions
            if matches_question(
                query, q, (tag_names[t] for t in q.tag_ids if t in tag_names)
            )
        ]

    def get_questions_by_filter(
        self,
        start_index: int = 0,
        order: QuestionOrder | str | None = QuestionOrder.NEWEST,
        search: str | None = "",
    ) -> QuestionPage:
        """Filter, order and paginate questions.

        Args:
            start_index: Offset of the first question on the page
            order: Display order (name or QuestionOrder)
            search: Search string ("" matches everything)

        Returns:
            The requested page and the total number of matches
        """
        order = (
            order if isinstance(order, QuestionOrder) else QuestionOrder.from_name(order)
        )
        start_index = max(start_index, 0)
        with logfire.span(
            "question_service.get_questions_by_filter",
            start_index=start_index,
            order=order.value,
            search=search,
        ):
            matches = sort_questions(self.filter_questions(search), order)
            page = matches[start_index : start_index + self.page_size]
            logfire.info("Questions filtered", total=len(matches), returned=len(page))
            return QuestionPage(
                questions=tuple(page),
                total=len(matches),
                start_index=start_index,
                page_size=self.page_size,
            )
