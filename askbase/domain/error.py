"""Domain layer errors.

Facade lookups return None for unknown ids; these are raised only by
the strict accessors.
"""


class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    """Raised when a question, answer or tag is required but missing."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
