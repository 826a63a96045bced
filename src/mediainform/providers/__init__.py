"""MediaInfo providers for mediainform."""

from mediainform.config import get_config
from mediainform.exceptions import ProviderNotLoadedError
from mediainform.providers.base import BaseProvider, ProviderHandle
from mediainform.providers.cli import MediaInfoCLIProvider
from mediainform.providers.library import PyMediaInfoProvider

# All provider classes (order doesn't matter, priority is used)
_PROVIDERS: list[type[BaseProvider]] = [
    MediaInfoCLIProvider,
    PyMediaInfoProvider,
]


def get_available_providers() -> list[BaseProvider]:
    """Get list of available provider instances, sorted by priority.

    Returns:
        List of provider instances that are available on this system,
        sorted by priority (lowest first).
    """
    available = [cls() for cls in _PROVIDERS if cls.is_available()]
    available.sort(key=lambda x: x.priority)
    return available


def get_provider(name: str | None = None) -> BaseProvider:
    """Get a provider by name, or the first available one.

    Args:
        name: Provider name; defaults to the configured one, then to auto

    Raises:
        ProviderNotLoadedError: If the named provider is unknown or no
            provider is available
    """
    name = name or get_config().provider.name
    if name:
        for provider_cls in _PROVIDERS:
            if provider_cls.name == name:
                return provider_cls()
        raise ProviderNotLoadedError(f"Unknown provider: {name}")

    available = get_available_providers()
    if not available:
        raise ProviderNotLoadedError(
            "No MediaInfo provider available. Install the mediainfo binary "
            "or pip install mediainform[library]"
        )
    return available[0]


def get_provider_status() -> dict[str, bool]:
    """Get availability status of all providers.

    Returns:
        Dict mapping provider names to availability status.
    """
    return {provider_cls.name: provider_cls.is_available() for provider_cls in _PROVIDERS}


__all__ = [
    # Base class
    "BaseProvider",
    "ProviderHandle",
    # Providers
    "MediaInfoCLIProvider",
    "PyMediaInfoProvider",
    # Functions
    "get_available_providers",
    "get_provider",
    "get_provider_status",
]
