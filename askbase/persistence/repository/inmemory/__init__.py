"""In-memory repository implementations.

The knowledge base keeps everything in process memory; these are the
repositories it runs on.
"""

from .answer import InMemoryAnswerRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
]
