"""Question search matching."""

from collections.abc import Iterable

from askbase.domain.model.question import Question
from askbase.domain.value import SearchQuery


def matches_text(query: SearchQuery, question: Question) -> bool:
    """Whether the text term occurs in the question title or text."""
    if not query.text_term:
        return False
    return (
        query.text_term in question.title.lower()
        or query.text_term in question.text.lower()
    )


def matches_tags(query: SearchQuery, tag_names: Iterable[str]) -> bool:
    """Whether every tag term names one of the question's tags."""
    if not query.tag_terms:
        return False
    names = {name.lower() for name in tag_names}
    return all(term in names for term in query.tag_terms)


def matches_question(
    query: SearchQuery, question: Question, tag_names: Iterable[str]
) -> bool:
    """Match a question against a parsed search.

    A question matches when the text term matches OR all tag terms match.
    An empty search string matches every question.

    Args:
        query: Parsed search string
        question: Candidate question
        tag_names: Names of the tags the question references

    Returns:
        True if the question belongs in the results
    """
    if query.is_empty:
        return True
    return matches_text(query, question) or matches_tags(query, tag_names)
