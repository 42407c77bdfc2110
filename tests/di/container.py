"""Test container with selectable mock components."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from remark.util.di import PROVIDERS, Component, get_provider, swappable_components


def build_test_container(
    unmock: set[Component] | None = None, with_fastapi: bool = False
) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Args:
        unmock: Components to run with their production implementation
        with_fastapi: Include the FastAPI request provider, for app tests

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is requested

    Examples:
        # In-memory repositories, recorded events
        container = build_test_container()

        # Real PostgreSQL, assumes a migrated database
        container = build_test_container(unmock={"persistence"})
    """
    unmock = set(unmock or ())
    unknown = unmock - swappable_components(PROVIDERS)
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(
            base,
            use_mock=base.__mock_component__ is not None
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    if with_fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)
