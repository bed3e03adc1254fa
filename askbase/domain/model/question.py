"""Question aggregate root.

Questions reference their tags and answers by id. All changes produce a
new Question through the methods below; the stored copy is replaced by
the repository.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from askbase.domain.model.answer import Answer
from askbase.domain.model.common import DomainModel
from askbase.domain.value import AnswerId, QuestionId, TagId
from askbase.util.clock import naive_local


class Question(DomainModel):
    """Question aggregate root.

    Invariants:
    - tag_ids keeps insertion order with duplicates removed
    - answer_ids is append-only, in the order answers were posted
    - last_answer_at is the newest answer timestamp, None without answers
    - view_count never decreases
    """

    id: QuestionId
    title: str
    text: str
    tag_ids: tuple[TagId, ...] = ()
    authored_by: str
    asked_at: datetime
    answer_ids: tuple[AnswerId, ...] = ()
    view_count: int = Field(default=0, ge=0)
    last_answer_at: Optional[datetime] = None

    @field_validator("tag_ids")
    @classmethod
    def dedupe_tag_ids(cls, v: tuple[TagId, ...]) -> tuple[TagId, ...]:
        """Collapse repeated tag ids, keeping the first occurrence."""
        return tuple(dict.fromkeys(v))

    @field_validator("asked_at", "last_answer_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store timestamps as naive local time."""
        return naive_local(v) if v is not None else None

    @model_validator(mode="after")
    def validate_last_answer_at(self) -> "Question":
        """A question without answers cannot have a last answer time."""
        if not self.answer_ids and self.last_answer_at is not None:
            raise ValueError("last_answer_at requires at least one answer")
        return self

    @property
    def answer_count(self) -> int:
        """Number of answers posted to this question."""
        return len(self.answer_ids)

    def with_answer(self, answer: Answer) -> "Question":
        """Return a copy with the answer appended.

        Adding an answer that is already referenced returns the question
        unchanged. last_answer_at only moves forward.
        """
        if answer.id in self.answer_ids:
            return self

        last_answer_at = answer.posted_at
        if self.last_answer_at is not None and self.last_answer_at > last_answer_at:
            last_answer_at = self.last_answer_at

        return self.model_copy(
            update={
                "answer_ids": self.answer_ids + (answer.id,),
                "last_answer_at": last_answer_at,
            }
        )

    def with_view(self) -> "Question":
        """Return a copy with the view count incremented."""
        return self.model_copy(update={"view_count": self.view_count + 1})
