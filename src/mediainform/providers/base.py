"""Base provider class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from mediainform.exceptions import ProviderNotLoadedError


@dataclass
class ProviderHandle:
    """An opened file, as seen by a provider."""

    path: str
    closed: bool = False


class BaseProvider(ABC):
    """Abstract base class for MediaInfo providers.

    A provider wraps the native analysis engine behind four operations:
    load the engine, open a file, request its report, close the file.
    Providers follow the same plugin pattern as the rest of the package:
    each one checks its own availability and the first available one by
    priority is used.

    Attributes:
        name: Human-readable name of the provider
        priority: Lower numbers are tried first (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    def __init__(self) -> None:
        self._loaded = False

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this provider is available.

        Returns:
            True if all dependencies are available
        """
        pass

    @property
    def loaded(self) -> bool:
        """Return True once load() succeeded."""
        return self._loaded

    def load(self) -> bool:
        """Load the engine. Returns True on success."""
        self._loaded = self.is_available()
        return self._loaded

    @abstractmethod
    def open_file(self, path: str) -> ProviderHandle:
        """Open a file for analysis.

        Raises:
            ProviderNotLoadedError: If load() was not called successfully
            FileOpenError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def inform(self, handle: ProviderHandle) -> dict[str, Any]:
        """Return the provider's report for an opened file as a JSON tree.

        Raises:
            FileOpenError: If the engine fails on the file
            ReportDecodeError: If the engine output is not valid JSON
        """
        pass

    def close(self, handle: ProviderHandle) -> None:
        """Close an opened file."""
        handle.closed = True

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise ProviderNotLoadedError(f"{self.name} provider was not loaded")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
