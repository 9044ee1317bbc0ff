"""Test container with in-memory components unless asked otherwise."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from sonic.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Mockable components use their in-memory implementation unless named in
    ``unmock``. Unmocked persistence needs a reachable PostgreSQL (see
    DATABASE__URL).

    Examples:
        # Unit tests - in-memory stores
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})

        # App under test - in-memory stores behind the HTTP layer
        app = create_app(container=build_test_container())

    Raises:
        ValueError: If unmock names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container back a FastAPI app
    return make_async_container(*providers, FastapiProvider())
