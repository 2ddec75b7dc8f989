"""Dependency injection wiring."""

from typing import Type

from peerskill.util.di.application import ProdApplicationProvider
from peerskill.util.di.base import Component, ProviderBase
from peerskill.util.di.core import ProdConfigProvider
from peerskill.util.di.domain import ProdDomainProvider
from peerskill.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and application providers are fixed; the rest are
# component bases resolved through get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a test implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider class from PROVIDERS.

    Fixed providers resolve to themselves. A component base resolves to
    the subclass whose ``__is_mock__`` equals ``use_mock``.

    Raises:
        ValueError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "PROVIDERS",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
