"""Production container and its FastAPI binding."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from remark.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    Settings are read from the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's dishka routes from ``container``.

    Calling it again replaces the container, which is how tests swap in
    their own.
    """
    setup_dishka(container, app)
