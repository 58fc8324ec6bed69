"""Dependency injection wiring."""

from typing import Type

from ballot.util.di.application import ProdApplicationProvider
from ballot.util.di.base import Component, ProviderBase
from ballot.util.di.core import ProdConfigProvider
from ballot.util.di.domain import ProdDomainProvider
from ballot.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Concrete layers first, then swappable infrastructure components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve an entry of ``PROVIDERS`` to the class to instantiate.

    Args:
        base: Provider listed in ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself when concrete, otherwise the matching subclass

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    if not base.is_mockable():
        return base

    impl = base.implementation(use_mock)
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return impl


def mockable_components() -> set[str]:
    """Names of the components that have a mock implementation registered."""
    return {p.__mock_component__ for p in PROVIDERS if p.is_mockable()}


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
