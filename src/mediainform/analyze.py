"""Core entry points."""

import logging
import os
import warnings

from mediainform.exceptions import MediaInfoError, ProviderNotLoadedError
from mediainform.models import Info, RawReport
from mediainform.normalize import normalize
from mediainform.providers import BaseProvider, get_provider

logger = logging.getLogger(__name__)


def inform(path: str, provider: BaseProvider | None = None) -> Info:
    """Analyze a media file and return its normalized Info.

    This is the main entry point. It:
    1. Resolves the absolute path of the file
    2. Loads the provider (the mediainfo binary or libmediainfo)
    3. Opens the file and requests the provider's JSON report
    4. Normalizes the report into an Info aggregate

    Args:
        path: Path to the media file
        provider: Provider to use; defaults to get_provider()

    Returns:
        Info with ``general.complete_name`` set to the absolute path

    Raises:
        ProviderNotLoadedError: If the provider cannot be loaded
        FileOpenError: If the provider cannot open the file
        ReportDecodeError: If the provider's report is malformed
    """
    abs_path = os.path.abspath(path)

    if provider is None:
        provider = get_provider()
    if not provider.loaded and not provider.load():
        raise ProviderNotLoadedError(f"{provider.name} provider could not be loaded")

    handle = provider.open_file(abs_path)
    try:
        tree = provider.inform(handle)
    finally:
        provider.close(handle)

    report = RawReport.from_tree(tree)
    logger.debug("%s: %d raw tracks from %s", abs_path, len(report.tracks), provider.name)
    return normalize(report, complete_name=abs_path)


def inform_files(paths: list[str], provider: BaseProvider | None = None) -> list[Info]:
    """Analyze multiple media files.

    Files that fail are skipped with a warning.

    Args:
        paths: List of file paths
        provider: Provider shared by all files

    Returns:
        List of Info objects
    """
    results = []
    for path in paths:
        try:
            results.append(inform(path, provider=provider))
        except MediaInfoError as e:
            warnings.warn(f"Failed to analyze {path}: {e}", stacklevel=2)
    return results
