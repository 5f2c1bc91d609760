"""Core DI providers."""

from dishka import Scope, provide

from blog.config import Settings
from blog.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config component base.

    Swappable so tests can point the application at a throwaway database.
    """

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
