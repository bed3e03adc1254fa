"""Tag entity for categorizing questions."""

from askbase.domain.model.common import DomainModel
from askbase.domain.value import TagId


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    Tags are created the first time a question uses an unseen name and are
    never deleted. Names are stored as given; creation matches them exactly
    while search compares them case-insensitively.
    """

    id: TagId
    name: str
