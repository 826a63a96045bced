"""Conversion between seconds and ``HH:MM:SS.mmm`` strings."""

import math
import re

from .coerce import to_float32

_TIMESTAMP_RE = re.compile(r"(\d{2,}):(\d{2}):(\d{2})\.(\d{3})")

# Chapter keys in the Menu track's extra bag, e.g. "_00_01_47_607"
_CHAPTER_KEY_RE = re.compile(r"_(\d{2,})_(\d{2})_(\d{2})_(\d{3})")


def encode(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS.mmm``.

    The value is converted to whole milliseconds first and all unit
    arithmetic is done on that integer, so float drift never leaks into
    the hour/minute/second split.

    Examples:
        >>> encode(123.6)
        '00:02:03.600'
        >>> encode(4086.355)
        '01:08:06.355'
    """
    if not math.isfinite(seconds) or seconds < 0:
        return "00:00:00.000"

    millis = int(to_float32(seconds * 1000))
    total_seconds, millis = divmod(millis, 1000)
    minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def decode(timestamp: str) -> float:
    """Parse ``HH:MM:SS.mmm`` back into seconds (single precision).

    Raises:
        ValueError: If the string is not in ``HH:MM:SS.mmm`` form
    """
    match = _TIMESTAMP_RE.fullmatch(timestamp)
    if not match:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")

    hours, minutes, secs, millis = (int(group) for group in match.groups())
    whole = to_float32(hours * 3600 + minutes * 60 + secs)
    return to_float32(whole + to_float32(millis / 1000))


def key_to_timestamp(key: str) -> str:
    """Turn a chapter key such as ``_00_01_47_607`` into ``00:01:47.607``.

    Raises:
        ValueError: If the key does not follow the ``_HH_MM_SS_fff`` convention
    """
    match = _CHAPTER_KEY_RE.fullmatch(key)
    if not match:
        raise ValueError(f"Invalid chapter key: {key!r}")
    hours, minutes, secs, millis = match.groups()
    return f"{hours}:{minutes}:{secs}.{millis}"
