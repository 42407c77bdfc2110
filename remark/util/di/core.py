"""Configuration providers."""

from dishka import Scope, provide

from remark.config import AuthSettings, CommentSettings, EventSettings, Settings
from remark.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, read once per application."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Load settings from the environment and ``.env``."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide
    def provide_event_settings(self, settings: Settings) -> EventSettings:
        return settings.events
