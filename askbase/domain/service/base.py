"""Base class for domain services."""


class Service:
    """Domain service.

    Services own the repositories and the clock; they are the only code
    that creates or replaces entities.
    """
