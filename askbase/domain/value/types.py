"""Domain value objects for Askbase."""

import re
from enum import Enum

from askbase.domain.value.common import ValueObject

# Bracketed tag terms in a search string, e.g. "[react]"
TAG_TERM_PATTERN = re.compile(r"\[([^\]]+)\]")


class QuestionOrder(str, Enum):
    """Display order for question listings."""

    NEWEST = "newest"  # Sort by asked_at DESC
    ACTIVE = "active"  # Sort by most recent answer, then asked_at DESC
    UNANSWERED = "unanswered"  # Only questions without answers, asked_at DESC

    @classmethod
    def from_name(cls, name: object) -> "QuestionOrder":
        """Resolve an order name case-insensitively.

        Unknown, missing or non-string names fall back to NEWEST.
        """
        if not isinstance(name, str) or not name:
            return cls.NEWEST
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.NEWEST


class SearchQuery(ValueObject):
    """Parsed search string.

    A search string mixes free text with bracketed tag terms:
    "android studio [react] [java]" has the text term "android studio"
    and the tag terms ("react", "java"). Both are lower-cased.
    """

    raw: str = ""
    text_term: str = ""
    tag_terms: tuple[str, ...] = ()

    @classmethod
    def parse(cls, search: str | None) -> "SearchQuery":
        """Split a search string into its text term and tag terms."""
        search = search or ""
        tag_terms = tuple(m.lower() for m in TAG_TERM_PATTERN.findall(search))
        text_term = TAG_TERM_PATTERN.sub("", search).strip().lower()
        return cls(raw=search, text_term=text_term, tag_terms=tag_terms)

    @property
    def is_empty(self) -> bool:
        """An empty search string disables filtering entirely."""
        return self.raw == ""
