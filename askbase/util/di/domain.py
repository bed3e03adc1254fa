"""Domain layer DI providers."""

from dishka import Scope, provide

from askbase.config import QuerySettings
from askbase.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
)
from askbase.domain.service import AnswerService, QuestionService, TagService
from askbase.util.clock import Clock
from askbase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped to share the process-wide stores.
    """

    scope = Scope.APP

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        tag_service: TagService,
        clock: Clock,
        query_settings: QuerySettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            tag_service=tag_service,
            clock=clock,
            page_size=query_settings.page_size,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        clock: Clock,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            clock=clock,
        )
