"""Answer entity."""

from datetime import datetime

from pydantic import field_validator

from askbase.domain.model.common import DomainModel
from askbase.domain.value import AnswerId
from askbase.util.clock import naive_local


class Answer(DomainModel):
    """Answer posted to a question.

    Answers are immutable once created. The owning question holds the
    reference to the answer, the answer does not know its question.
    """

    id: AnswerId
    text: str
    authored_by: str
    posted_at: datetime

    @field_validator("posted_at")
    @classmethod
    def normalize_posted_at(cls, v: datetime) -> datetime:
        """Store timestamps as naive local time."""
        return naive_local(v)
