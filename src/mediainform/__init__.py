"""mediainform - typed media metadata from MediaInfo.

Turns MediaInfo's all-strings JSON report into typed track records and
chapter ranges.

Usage:
    from mediainform import inform

    info = inform("movie.mkv")

    print(info.general.format, info.general.duration)
    for video in info.video_tracks:
        print(video.format, video.width, video.height)

    for chapter in info.chapters:
        print(chapter.start_time_str, chapter.end_time_str, chapter.title)

    # Export as JSON
    print(info.model_dump_json())
"""

from mediainform._version import __version__
from mediainform.analyze import inform, inform_files
from mediainform.exceptions import (
    FileOpenError,
    MediaInfoError,
    ProviderNotLoadedError,
    ReportDecodeError,
)
from mediainform.formatters import (
    format_default,
    format_json,
    format_quiet,
    to_dict,
)
from mediainform.models import (
    Audio,
    Entry,
    General,
    Info,
    Menu,
    RawReport,
    RawTrack,
    Text,
    Video,
)
from mediainform.normalize import normalize
from mediainform.providers import (
    get_available_providers,
    get_provider,
    get_provider_status,
)
from mediainform.utils import decode, encode

__all__ = [
    # Version
    "__version__",
    # Main functions
    "inform",
    "inform_files",
    "normalize",
    # Models
    "Info",
    "General",
    "Video",
    "Audio",
    "Text",
    "Menu",
    "Entry",
    "RawReport",
    "RawTrack",
    # Errors
    "MediaInfoError",
    "ProviderNotLoadedError",
    "FileOpenError",
    "ReportDecodeError",
    # Time codec
    "encode",
    "decode",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
    # Provider functions
    "get_available_providers",
    "get_provider",
    "get_provider_status",
]
