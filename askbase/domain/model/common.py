"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for Tag, Answer and Question.

    Entities are frozen. A change builds a replacement with model_copy and
    the service saves it back to its repository, so objects handed out by
    queries never change underneath the caller.
    """

    model_config = ConfigDict(frozen=True)
