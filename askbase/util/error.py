"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings or seed data that the application can't start with."""


class DependencyInjectionError(UtilError):
    """Provider wiring that can't be resolved."""
