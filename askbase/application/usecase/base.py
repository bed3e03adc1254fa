"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating the knowledge base."""

    @abstractmethod
    def execute(self, request: Any) -> Any:
        pass
