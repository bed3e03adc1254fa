"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askbase.domain.model.tag import Tag
from askbase.domain.value import TagId


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    def next_id(self) -> TagId:
        """Reserve the identifier for the next new tag."""
        pass

    @abstractmethod
    def save(self, tag: Tag) -> Tag:
        """Save a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by its exact (case-sensitive) name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Tag]:
        """Find all tags in insertion order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored tags."""
        pass
