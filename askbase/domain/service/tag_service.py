"""Tag domain service."""

from collections.abc import Iterable

import logfire

from askbase.domain.model.tag import Tag
from askbase.domain.repository.tag import TagRepository
from askbase.domain.value import TagId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    def resolve_or_create(self, name: str) -> Tag:
        """Get the tag with this exact name, creating it if unseen.

        Matching is case-sensitive: "React" and "react" are different tags.

        Args:
            name: Tag name

        Returns:
            Existing or newly created tag
        """
        tag = self.tag_repository.find_by_name(name)
        if tag:
            return tag

        with logfire.span("tag_service.create_tag", tag_name=name):
            tag = self.tag_repository.save(
                Tag(id=self.tag_repository.next_id(), name=name)
            )
            logfire.info("Tag created", tag_id=tag.id, tag_name=name)
            return tag

    def resolve_names(self, names: Iterable[str]) -> list[TagId]:
        """Resolve tag names to ids, creating missing tags.

        Args:
            names: Tag names in the order given

        Returns:
            Tag ids in first-seen order, each id at most once
        """
        tag_ids: list[TagId] = []
        for name in names:
            tag_id = self.resolve_or_create(name).id
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)
        return tag_ids

    def get_tag_by_id(self, tag_id: TagId) -> Tag | None:
        """Get a tag by ID.

        Args:
            tag_id: Tag ID

        Returns:
            Tag if found, None otherwise
        """
        return self.tag_repository.find_by_id(tag_id)

    def get_all_tags(self) -> list[Tag]:
        """Get every tag in creation order."""
        return self.tag_repository.find_all()

    def get_tag_count(self) -> int:
        """Get the number of tags."""
        return self.tag_repository.count()

    def get_tag_names(self, tag_ids: Iterable[TagId]) -> list[str]:
        """Map tag ids to names, skipping unknown ids."""
        names = []
        for tag_id in tag_ids:
            tag = self.tag_repository.find_by_id(tag_id)
            if tag:
                names.append(tag.name)
        return names
