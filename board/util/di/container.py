"""Wiring of the board's DI container into the FastAPI app."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every component uses its production implementation, so persistence goes
    to Postgres through the engine configured by ``DATABASE__URL``. The engine
    is disposed when the container is closed.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can resolve use cases."""
    setup_dishka(container, app)
