"""Pydantic models for mediainform."""

from .info import Info
from .menu import Entry, Menu
from .raw import RawReport, RawTrack
from .tracks import Audio, General, Text, Video

__all__ = [
    # Main model
    "Info",
    # Tracks
    "General",
    "Video",
    "Audio",
    "Text",
    # Chapters
    "Menu",
    "Entry",
    # Raw provider report
    "RawReport",
    "RawTrack",
]
