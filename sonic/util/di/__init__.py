"""Dependency injection module."""

from typing import Type

from sonic.util.di.application import ProdApplicationProvider
from sonic.util.di.base import Component, ProviderBase
from sonic.util.di.core import ProdConfigProvider
from sonic.util.di.domain import ProdDomainProvider
from sonic.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Every provider the container is built from; mockable ones are resolved
# to an implementation by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Provider class to instantiate for an entry of PROVIDERS.

    Raises:
        ValueError: If the requested implementation does not exist
    """
    return base.implementation(use_mock)


def mockable_components() -> set[Component]:
    """Names of the components tests can swap for in-memory versions."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
