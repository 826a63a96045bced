"""Tolerant coercion of raw provider strings into typed values.

MediaInfo reports every field as a string, whatever its meaning. These
helpers turn those strings into ints, floats, booleans and datetimes and
never raise: a missing or garbled field becomes the type's zero value.
"""

import json
import math
import re
import struct
from datetime import datetime, timezone
from typing import Any

# Zero value for timestamp fields
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_MAX_UINT64 = 2**64 - 1

_DIGITS_RE = re.compile(r"[0-9]+")

# "UTC 2020-10-20 19:04:07" or "UTC 2020-11-17 13:30:42.535"
_ZONE_FIRST_RE = re.compile(
    r"(?P<zone>[A-Z]{3,5}) (?P<date>\d{4}-\d{2}-\d{2}) (?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?"
)
# "2020-10-20 19:04:07 UTC" (newer MediaInfo builds)
_ZONE_LAST_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2}) (?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))? (?P<zone>[A-Z]{3,5})"
)


def to_float32(value: float) -> float:
    """Narrow a float to the nearest IEEE-754 single precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_unsigned(value: Any) -> int:
    """Parse a base-10 unsigned integer, 0 on failure.

    Values too large for 64 bits saturate at 2**64-1.
    """
    if not isinstance(value, str) or not _DIGITS_RE.fullmatch(value):
        return 0
    return min(int(value), _MAX_UINT64)


def parse_float32(value: Any) -> float:
    """Parse a decimal number and narrow it to single precision, 0.0 on failure."""
    if not isinstance(value, str) or not value or value != value.strip() or "_" in value:
        return 0.0
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return to_float32(number)


def parse_bool(value: Any) -> bool:
    """Return True only for a case-insensitive "Yes"."""
    if not isinstance(value, str):
        return False
    return value.upper() == "YES"


def parse_timestamp(value: Any) -> datetime:
    """Parse a MediaInfo date such as ``UTC 2020-10-20 19:04:07``.

    The zone abbreviation is part of the literal format. It is not looked up
    in a zone database and the result is always at offset zero.

    Returns:
        Timezone-aware datetime, or ZERO_TIME if the value does not parse
    """
    if not isinstance(value, str):
        return ZERO_TIME

    match = _ZONE_FIRST_RE.fullmatch(value) or _ZONE_LAST_RE.fullmatch(value)
    if not match:
        return ZERO_TIME

    try:
        parsed = datetime.strptime(f"{match['date']} {match['time']}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return ZERO_TIME

    frac = match["frac"]
    if frac:
        # datetime only goes down to microseconds
        parsed = parsed.replace(microsecond=int(frac[:6].ljust(6, "0")))

    return parsed.replace(tzinfo=timezone.utc)


def to_text(value: Any) -> str:
    """Coerce a raw field to text.

    ``Encoded_Library`` may arrive as a plain string or as an object like
    ``{"Name": "x265", "Version": "2.5"}``. Objects are rendered the way
    MediaInfo renders the plain form: ``"x265 - 2.5"``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        parts = [str(value[key]) for key in ("Name", "Version") if value.get(key)]
        if parts:
            return " - ".join(parts)
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def to_lower_text(value: Any) -> str:
    """Coerce a raw field to lower-cased text."""
    return to_text(value).lower()
