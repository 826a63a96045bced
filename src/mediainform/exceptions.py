"""Exceptions raised by mediainform.

Only structural failures are exceptions. A field that does not parse is
replaced by its zero value and never surfaces here.
"""


class MediaInfoError(Exception):
    """Base class for mediainform errors."""

    pass


class ProviderNotLoadedError(MediaInfoError):
    """Raised when no MediaInfo provider could be loaded."""

    pass


class FileOpenError(MediaInfoError):
    """Raised when the provider cannot open the requested file."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"MediaInfo can't open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ReportDecodeError(MediaInfoError):
    """Raised when a provider report is not the expected JSON tree."""

    pass
