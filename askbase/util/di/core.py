"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from askbase.config import QuerySettings, SeedSettings, Settings
from askbase.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_query_settings(self, settings: Settings) -> QuerySettings:
        """Provide query settings."""
        return settings.query

    @provide(scope=Scope.APP)
    def provide_seed_settings(self, settings: Settings) -> SeedSettings:
        """Provide seed settings."""
        return settings.seed
