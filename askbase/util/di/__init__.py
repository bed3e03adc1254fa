"""Dependency injection providers.

Every provider is listed once in PROVIDERS. A provider that has subclasses
is a swappable component (the clock): its subclasses are the production
and mock implementations, told apart by ``__is_mock__``. Mock
implementations live with the tests and register themselves by
subclassing.
"""

from collections.abc import Collection
from typing import Type

from askbase.util.di.application import ProdApplicationProvider
from askbase.util.di.base import Component, ProviderBase
from askbase.util.di.core import ProdConfigProvider
from askbase.util.di.domain import ProdDomainProvider
from askbase.util.di.infrastructure import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
)
from askbase.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ClockProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether a provider has swappable implementations."""
    return bool(base.__subclasses__())


def component_names() -> set[Component]:
    """Names of all swappable components."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if is_component(base) and base.__mock_component__
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for an entry in PROVIDERS.

    Args:
        base: Provider listed in PROVIDERS
        use_mock: Whether a component should use its mock implementation

    Returns:
        The provider itself, or the chosen component implementation

    Raises:
        DependencyInjectionError: If the component has no implementation
            of the requested kind
    """
    if not is_component(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {name}")


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the named components.

    Raises:
        DependencyInjectionError: If an unknown component is named
    """
    unknown = set(mocked) - component_names()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "component_names",
    "get_provider",
    "is_component",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ClockProvider",
    "ProdClockProvider",
]
