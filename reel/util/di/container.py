"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from reel.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL persistence, env settings.

    FastapiProvider is included so request-scoped dependencies can see the
    incoming Request.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; each request gets its own scope.

    Args:
        app: FastAPI application
        container: Root (APP-scoped) container
    """
    setup_dishka(container, app)
