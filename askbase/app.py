"""Application bootstrap."""

from dishka import Container

from askbase.config import Settings
from askbase.util.di.container import create_container
from askbase.util.logging import setup_logging
from askbase.util.observability import configure_logfire


def create_app(settings: Settings | None = None) -> Container:
    """Configure observability and logging, then build the container.

    The presentation layer resolves KnowledgeBase or individual use cases
    from the returned container:

        container = create_app()
        with container() as request:
            listing = request.get(ListQuestionsUseCase).execute(
                {"start_index": 0, "order": "active", "search": "[python]"}
            )

    Args:
        settings: Settings used for logging/observability (read from the
            environment if None)

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    configure_logfire(settings)
    setup_logging(settings)
    return create_container()
