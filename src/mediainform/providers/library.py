"""libmediainfo provider, through the pymediainfo bindings."""

import json
import logging
from typing import Any, ClassVar

from mediainform.config import get_config
from mediainform.exceptions import FileOpenError, ReportDecodeError
from mediainform.providers.base import BaseProvider, ProviderHandle

logger = logging.getLogger(__name__)


class PyMediaInfoProvider(BaseProvider):
    """Load libmediainfo with pymediainfo and request JSON reports.

    pymediainfo is an optional dependency (``pip install mediainform[library]``).
    """

    name: ClassVar[str] = "pymediainfo"
    priority: ClassVar[int] = 20

    def __init__(self, library_file: str | None = None) -> None:
        super().__init__()
        self.library_file = library_file or get_config().provider.library_file

    @classmethod
    def is_available(cls) -> bool:
        """Check if pymediainfo is installed and can load libmediainfo."""
        try:
            from pymediainfo import MediaInfo
        except ImportError:
            return False
        return bool(MediaInfo.can_parse(get_config().provider.library_file))

    def load(self) -> bool:
        """Load libmediainfo."""
        try:
            from pymediainfo import MediaInfo
        except ImportError:
            logger.debug("pymediainfo is not installed")
            self._loaded = False
            return False
        self._loaded = bool(MediaInfo.can_parse(self.library_file))
        return self._loaded

    def open_file(self, path: str) -> ProviderHandle:
        """Return a handle; libmediainfo opens the file during inform()."""
        self._ensure_loaded()
        return ProviderHandle(path=path)

    def inform(self, handle: ProviderHandle) -> dict[str, Any]:
        """Parse the file with libmediainfo and return its JSON report."""
        self._ensure_loaded()
        from pymediainfo import MediaInfo

        try:
            output = MediaInfo.parse(
                handle.path, library_file=self.library_file, output="JSON", full=False
            )
        except FileNotFoundError as e:
            raise FileOpenError(handle.path, "no such file") from e
        except (OSError, RuntimeError) as e:
            raise FileOpenError(handle.path, str(e)) from e

        try:
            data: dict[str, Any] = json.loads(output)
        except (TypeError, json.JSONDecodeError) as e:
            raise ReportDecodeError(f"Invalid libmediainfo output for {handle.path}: {e}") from e
        return data
