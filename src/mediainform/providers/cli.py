"""MediaInfo command-line provider."""

import json
import logging
import os
import shutil
import subprocess
from typing import Any, ClassVar

from mediainform.config import get_config
from mediainform.exceptions import FileOpenError, ReportDecodeError
from mediainform.providers.base import BaseProvider, ProviderHandle

logger = logging.getLogger(__name__)


class MediaInfoCLIProvider(BaseProvider):
    """Run the ``mediainfo`` binary and read its JSON output.

    The binary path and the timeout come from configuration unless given
    explicitly.
    """

    name: ClassVar[str] = "mediainfo-cli"
    priority: ClassVar[int] = 10  # Try first

    def __init__(self, mediainfo_path: str | None = None, timeout: int | None = None) -> None:
        super().__init__()
        config = get_config().provider
        self.mediainfo_path = mediainfo_path or config.mediainfo_path
        self.timeout = timeout or config.timeout_seconds

    @classmethod
    def is_available(cls) -> bool:
        """Check if the configured mediainfo binary is on PATH."""
        return shutil.which(get_config().provider.mediainfo_path) is not None

    def load(self) -> bool:
        """Resolve the mediainfo binary."""
        self._loaded = shutil.which(self.mediainfo_path) is not None
        if not self._loaded:
            logger.debug("mediainfo binary not found: %s", self.mediainfo_path)
        return self._loaded

    def open_file(self, path: str) -> ProviderHandle:
        """Check the file can be read and return a handle for it."""
        self._ensure_loaded()
        if not os.path.isfile(path):
            raise FileOpenError(path, "no such file")
        if not os.access(path, os.R_OK):
            raise FileOpenError(path, "permission denied")
        return ProviderHandle(path=path)

    def inform(self, handle: ProviderHandle) -> dict[str, Any]:
        """Run ``mediainfo --Output=JSON`` on the opened file."""
        self._ensure_loaded()
        cmd = [self.mediainfo_path, "--Output=JSON", handle.path]
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise FileOpenError(handle.path, f"mediainfo timed out after {e.timeout}s") from e
        except OSError as e:
            raise FileOpenError(handle.path, str(e)) from e

        if result.returncode != 0:
            raise FileOpenError(
                handle.path, f"mediainfo exited with {result.returncode}: {result.stderr.strip()}"
            )

        try:
            data: dict[str, Any] = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ReportDecodeError(f"Invalid mediainfo output for {handle.path}: {e}") from e
        return data
