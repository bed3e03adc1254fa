"""Application layer DI providers."""

from dishka import Scope, provide

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.answer import PostAnswerUseCase
from askbase.application.usecase.question import (
    AskQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from askbase.application.usecase.tag import ListTagsUseCase
from askbase.domain.service import AnswerService, QuestionService, TagService
from askbase.util.clock import Clock
from askbase.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_knowledge_base(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> KnowledgeBase:
        """Provide the knowledge base facade."""
        return KnowledgeBase(
            question_service=question_service,
            answer_service=answer_service,
            tag_service=tag_service,
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self, knowledge_base: KnowledgeBase
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(knowledge_base=knowledge_base)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, knowledge_base: KnowledgeBase, clock: Clock
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(knowledge_base=knowledge_base, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, knowledge_base: KnowledgeBase, clock: Clock
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(knowledge_base=knowledge_base, clock=clock)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self, knowledge_base: KnowledgeBase
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(knowledge_base=knowledge_base)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, knowledge_base: KnowledgeBase) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(knowledge_base=knowledge_base)
