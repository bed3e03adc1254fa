"""Persistence infrastructure providers."""

from dishka import Scope, provide

from askbase.config import SeedSettings
from askbase.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
)
from askbase.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
)
from askbase.persistence.seed import SeedData, load_seed
from askbase.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """In-memory persistence provider.

    Stores are APP-scoped: they live as long as the container and are
    seeded exactly once.
    """

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_seed(self, seed_settings: SeedSettings) -> SeedData:
        """Provide the construction payload (empty without a seed file)."""
        if seed_settings.path is None:
            return SeedData()
        return load_seed(seed_settings.path)

    @provide(scope=Scope.APP)
    def get_question_repository(self, seed: SeedData) -> QuestionRepository:
        """Provide Question repository."""
        return InMemoryQuestionRepository(seed.build_questions())

    @provide(scope=Scope.APP)
    def get_answer_repository(self, seed: SeedData) -> AnswerRepository:
        """Provide Answer repository."""
        return InMemoryAnswerRepository(seed.answers)

    @provide(scope=Scope.APP)
    def get_tag_repository(self, seed: SeedData) -> TagRepository:
        """Provide Tag repository."""
        return InMemoryTagRepository(seed.tags)
