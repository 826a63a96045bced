"""Rebuild chapter ranges from a Menu track.

MediaInfo reports chapters as entries of the Menu track's ``extra`` bag::

    "extra": {
        "_00_00_00_000": "en:Chapter 01",
        "_00_01_47_607": "en:Chapter 02",
    }

The key is the start time and the value is ``language:title``. Only start
times are given, so end times are derived from the next chapter after
sorting, and the last chapter runs to the end of the file.
"""

import logging

from mediainform.models import Entry, Menu, RawTrack
from mediainform.utils.coerce import parse_unsigned
from mediainform.utils.timecode import decode, encode, key_to_timestamp

logger = logging.getLogger(__name__)


def parse_chapter_value(value: str) -> tuple[str, str]:
    """Split ``language:title`` at the first colon.

    Raises:
        ValueError: If the value has no colon separator
    """
    language, sep, title = value.partition(":")
    if not sep:
        raise ValueError(f"Chapter value without 'language:title' separator: {value!r}")
    return language, title


def _parse_marker(key: str, value: str) -> Entry | None:
    """Build a start-only Entry from one extra pair, None if it is unusable."""
    if not key.startswith("_"):
        logger.debug("Skipping non-chapter menu field %r", key)
        return None

    try:
        start_str = key_to_timestamp(key)
        start = decode(start_str)
        language, title = parse_chapter_value(value)
    except ValueError as e:
        logger.warning("Skipping chapter %r: %s", key, e)
        return None

    return Entry(
        start_time=start,
        start_time_str=start_str,
        language=language,
        title=title,
    )


def reconstruct_entries(extra: dict[str, str], duration: float) -> list[Entry]:
    """Turn a Menu track's extra bag into contiguous, sorted chapters.

    Args:
        extra: The Menu track's ``extra`` mapping
        duration: Total file duration in seconds, used as the last end time

    Returns:
        Entries sorted by start time, empty if no key is a chapter marker
    """
    markers = []
    for key, value in extra.items():
        entry = _parse_marker(key, value)
        if entry is not None:
            markers.append(entry)
    if not markers:
        return []

    # Stable: equal start times keep the report's order
    markers.sort(key=lambda entry: entry.start_time)

    entries = []
    for current, following in zip(markers, markers[1:]):
        entries.append(
            current.model_copy(
                update={
                    "end_time": following.start_time,
                    "end_time_str": following.start_time_str,
                }
            )
        )
    entries.append(
        markers[-1].model_copy(update={"end_time": duration, "end_time_str": encode(duration)})
    )
    return entries


def build_menu(track: RawTrack, duration: float) -> Menu:
    """Build a Menu record from a raw Menu track."""
    return Menu(
        order=parse_unsigned(track.get("@typeorder")),
        duration=duration,
        entries=reconstruct_entries(track.extra, duration),
    )
