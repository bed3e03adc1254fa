"""List tags use case."""

import logfire
from pydantic import BaseModel

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.base import BaseUseCase


class TagItem(BaseModel):
    """Tag item in response."""

    tag_id: str
    name: str
    question_count: int


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]
    total: int


class ListTagsUseCase(BaseUseCase):
    """Use case for the tag overview page."""

    def __init__(self, knowledge_base: KnowledgeBase) -> None:
        """Initialize list tags use case.

        Args:
            knowledge_base: Knowledge base facade
        """
        self.knowledge_base = knowledge_base

    def execute(self, request: None = None) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Every tag with the number of questions using it
        """
        with logfire.span("list_tags.execute"):
            tag_items = [
                TagItem(
                    tag_id=tag.id,
                    name=tag.name,
                    question_count=self.knowledge_base.get_question_count_by_tag(
                        tag.id
                    ),
                )
                for tag in self.knowledge_base.get_tags()
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(
                tags=tag_items, total=self.knowledge_base.get_tag_count()
            )
