"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable components; each has a production and a mock provider
Component = Literal["clock"]


class ProviderBase(Provider):
    """Provider with component metadata.

    Attributes:
        __mock_component__: Component name, None for plain providers
        __is_mock__: True for the mock implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
