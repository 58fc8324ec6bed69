"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ballot.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production provider.

    Nothing is resolved here; the engine and settings are created on first
    use, so building the container never touches the database.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider makes the current Request injectable
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; the last call wins."""
    setup_dishka(container, app)
