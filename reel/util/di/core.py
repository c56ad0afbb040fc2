"""Configuration providers (never mocked)."""

from dishka import Scope, provide

from reel.config import AuthSettings, DatabaseSettings, Settings
from reel.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections other providers depend on.

    Settings come from the environment and .env; tests override them the
    same way.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide the JWT verification settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Provide the connection settings for the engine."""
        return settings.database
