"""Knowledge base facade.

KnowledgeBase is the single entry point the presentation layer talks to.
It owns the question, answer and tag stores (through the domain services)
and is the only place they are changed.

Build one explicitly and pass it around:

    kb = KnowledgeBase.create(seed=load_seed(path))
    qid = kb.add_question("How do I...", "Details", ["python"], "alice")
    page = kb.get_questions_by_filter(0, "active", "[python]")
"""

from collections.abc import Iterable

from askbase.domain.model import Answer, Question, Tag
from askbase.domain.service import (
    DEFAULT_PAGE_SIZE,
    AnswerService,
    QuestionPage,
    QuestionService,
    TagService,
)
from askbase.domain.value import AnswerId, QuestionId, QuestionOrder, TagId
from askbase.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
)
from askbase.persistence.seed import SeedData
from askbase.util.clock import Clock, SystemClock


class KnowledgeBase:
    """Question, answer and tag store with filtered queries.

    Reads return fresh lists of frozen entities, so callers can neither
    see later changes through an old result nor change stored state.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> None:
        """Initialize the knowledge base.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            tag_service: Tag domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.tag_service = tag_service

    @classmethod
    def create(
        cls,
        seed: SeedData | None = None,
        clock: Clock | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> "KnowledgeBase":
        """Build a knowledge base backed by in-memory stores.

        Args:
            seed: Initial tags, answers and questions (empty if None)
            clock: Time source for new posts (system clock if None)
            page_size: Questions per page in filtered listings

        Returns:
            Ready-to-use knowledge base
        """
        seed = seed or SeedData()
        clock = clock or SystemClock()

        question_repository = InMemoryQuestionRepository(seed.build_questions())
        answer_repository = InMemoryAnswerRepository(seed.answers)
        tag_repository = InMemoryTagRepository(seed.tags)

        tag_service = TagService(tag_repository=tag_repository)
        return cls(
            question_service=QuestionService(
                question_repository=question_repository,
                tag_service=tag_service,
                clock=clock,
                page_size=page_size,
            ),
            answer_service=AnswerService(
                answer_repository=answer_repository,
                question_repository=question_repository,
                clock=clock,
            ),
            tag_service=tag_service,
        )

    # Commands

    def add_question(
        self, title: str, text: str, tag_names: Iterable[str], authored_by: str
    ) -> QuestionId:
        """Add a question, creating tags on first use. Returns its id."""
        return self.question_service.ask_question(
            title=title, text=text, tag_names=tag_names, authored_by=authored_by
        ).id

    def add_answer(
        self, question_id: QuestionId, text: str, authored_by: str
    ) -> AnswerId | None:
        """Answer a question. Returns the answer id, or None if the question is unknown."""
        answer = self.answer_service.add_answer(
            question_id=question_id, text=text, authored_by=authored_by
        )
        return answer.id if answer else None

    def add_tag(self, name: str) -> TagId:
        """Get the id of the tag with this exact name, creating it if needed."""
        return self.tag_service.resolve_or_create(name).id

    def record_view(self, question_id: QuestionId) -> Question | None:
        """Count a view of a question. Returns None if the question is unknown."""
        return self.question_service.record_view(question_id)

    # Queries

    def get_question_by_id(self, question_id: QuestionId | None) -> Question | None:
        return self.question_service.get_question_by_id(question_id)

    def get_question(self, question_id: QuestionId) -> Question:
        """Like get_question_by_id, but raises NotFoundError for unknown ids."""
        return self.question_service.get_by_id(question_id)

    def get_question_answers(self, question: Question | None) -> list[Answer]:
        """Answers to a question, most recent first."""
        return self.answer_service.get_answers_for(question)

    def get_questions_by_filter(
        self,
        start_index: int = 0,
        order: QuestionOrder | str | None = QuestionOrder.NEWEST,
        search: str | None = "",
    ) -> QuestionPage:
        """Filter, order and paginate questions.

        The page may be empty when start_index is past the last match;
        total still counts every match.
        """
        return self.question_service.get_questions_by_filter(
            start_index=start_index, order=order, search=search
        )

    def get_questions(self) -> list[Question]:
        return self.question_service.get_all_questions()

    def get_answers(self) -> list[Answer]:
        return self.answer_service.get_all_answers()

    def get_tags(self) -> list[Tag]:
        return self.tag_service.get_all_tags()

    def get_tag_by_id(self, tag_id: TagId) -> Tag | None:
        return self.tag_service.get_tag_by_id(tag_id)

    def get_tag_count(self) -> int:
        return self.tag_service.get_tag_count()

    def get_question_count_by_tag(self, tag_id: TagId) -> int:
        return self.question_service.count_by_tag(tag_id)

    def get_tag_names(self, question: Question) -> list[str]:
        """Names of a question's tags in the question's tag order."""
        return self.tag_service.get_tag_names(question.tag_ids)
