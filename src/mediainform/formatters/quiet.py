"""Quiet output formatter - one-line summary."""

import os

from mediainform.models import Info
from mediainform.utils.timecode import encode


def format_quiet(info: Info) -> str:
    """Format Info as one-line summary.

    Format: filename | duration | video | audio | chapters
    """
    general = info.general
    parts = [os.path.basename(general.complete_name) or "-"]

    parts.append(encode(general.duration))

    if info.video_tracks:
        video = info.video_tracks[0]
        parts.append(f"{video.format} {video.resolution or 'N/A'}")
    else:
        parts.append("no video")

    if info.audio_tracks:
        audio = info.audio_tracks[0]
        parts.append(f"{audio.format} {audio.channels}ch")
    else:
        parts.append("no audio")

    parts.append(f"{len(info.chapters)} chapter(s)")

    return " | ".join(parts)


def format_quiet_list(infos: list[Info]) -> str:
    """Format multiple Info objects as one-line summaries, one per file."""
    return "\n".join(format_quiet(info) for info in infos)
