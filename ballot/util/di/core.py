"""Configuration provider."""

from dishka import Scope, provide

from ballot.config import AuthSettings, PollSettings, Settings
from ballot.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, read once per container from the environment."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_poll_settings(self, settings: Settings) -> PollSettings:
        return settings.polls
