"""Dependency injection module."""

from typing import Type

from blog.util.di.application import ApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ConfigProvider, ProdConfigProvider
from blog.util.di.infrastructure import PersistenceProvider

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Swappable component
    ConfigProvider,
    # Concrete providers
    PersistenceProvider,
    ApplicationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is swappable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Swappable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use the test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        # Concrete provider - no implementations, use as-is
        return base

    # Has subclasses - find implementation by __is_mock__ flag
    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "test" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ApplicationProvider",
    "ConfigProvider",
    "PersistenceProvider",
    "ProdConfigProvider",
]
