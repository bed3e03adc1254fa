"""Production dependency injection container."""

from dishka import Container, make_container

from askbase.util.di import build_providers


def create_container() -> Container:
    """Build the production container.

    Settings come from the environment. The knowledge base, its stores and
    the clock live for the lifetime of the container; use cases are
    created per request scope.
    """
    return make_container(*build_providers())
