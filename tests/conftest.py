"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from askbase.domain.model import Answer, Question
from askbase.domain.value import AnswerId, QuestionId, TagId

# Keep spans and events local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_question(
    question_id: str = "q-1",
    title: str = "Test Question",
    text: str = "Test content",
    tag_ids: tuple[str, ...] = (),
    asked_at: datetime | None = None,
    **kwargs,
) -> Question:
    """Helper function to build a Question with sensible defaults."""
    return Question(
        id=QuestionId(question_id),
        title=title,
        text=text,
        tag_ids=tuple(TagId(t) for t in tag_ids),
        authored_by=kwargs.pop("authored_by", "tester"),
        asked_at=asked_at or datetime(2024, 1, 1, 12, 0, 0),
        **kwargs,
    )


def make_answer(
    answer_id: str = "ans-1",
    posted_at: datetime | None = None,
    text: str = "Test answer",
) -> Answer:
    """Helper function to build an Answer with sensible defaults."""
    return Answer(
        id=AnswerId(answer_id),
        text=text,
        authored_by="answerer",
        posted_at=posted_at or datetime(2024, 1, 2, 12, 0, 0),
    )
