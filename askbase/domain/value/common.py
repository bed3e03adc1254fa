"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared by content (search queries, result pages)."""

    model_config = ConfigDict(frozen=True)
