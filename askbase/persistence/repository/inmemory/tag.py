"""In-memory implementation of Tag repository."""

from collections.abc import Iterable
from typing import Optional

from askbase.domain.model.tag import Tag
from askbase.domain.repository.tag import TagRepository
from askbase.domain.value import TAG_ID_PREFIX, TagId

from .common import next_free_id


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository."""

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        """Initialize repository, optionally with existing tags."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}
        for tag in tags:
            self.save(tag)

    def next_id(self) -> TagId:
        """Reserve the identifier for the next new tag."""
        return TagId(next_free_id(TAG_ID_PREFIX, len(self._tags), self._tags))

    def save(self, tag: Tag) -> Tag:
        """Save a tag."""
        self._tags[tag.id] = tag
        # First tag with a given name wins lookups by name
        self._name_index.setdefault(tag.name, tag.id)
        return tag

    def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by exact name."""
        tag_id = self._name_index.get(name)
        if tag_id:
            return self._tags.get(tag_id)
        return None

    def find_all(self) -> list[Tag]:
        """Find all tags in insertion order."""
        return list(self._tags.values())

    def count(self) -> int:
        """Count stored tags."""
        return len(self._tags)
