"""Test container with in-memory components and selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from ballot.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Every mockable component uses its mock unless named in ``unmock``.

    Args:
        unmock: Components to run with their production implementation

    Returns:
        Configured container

    Raises:
        ValueError: If ``unmock`` names a component that does not exist

    Examples:
        # Unit and API tests: in-memory persistence
        container = build_test_container()

        # Integration tests: real Postgres, assumed to be running and migrated
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = set(unmock) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.is_mockable() and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
