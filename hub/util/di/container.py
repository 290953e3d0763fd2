"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hub.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Steam
    and Epic adapters are created once per container; cookie stores are
    created per request around that request's cookies.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to the cookie providers
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Routes declare ``route_class=DishkaRoute`` and receive use cases and
    the request's CookieJar through ``FromDishka``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
