"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from linkshare.config import AuthSettings, EventBusSettings, ListingSettings, Settings
from linkshare.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        """Provide listing settings."""
        return settings.listing

    @provide
    def provide_event_bus_settings(self, settings: Settings) -> EventBusSettings:
        """Provide event bus settings."""
        return settings.event_bus
