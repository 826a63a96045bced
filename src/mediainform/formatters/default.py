"""Default output formatter - sectioned track and chapter summary."""

import os

from mediainform.models import Info
from mediainform.utils.coerce import ZERO_TIME
from mediainform.utils.timecode import encode


def _format_bit_rate(bit_rate: float) -> str:
    if not bit_rate:
        return "N/A"
    if bit_rate >= 1_000_000:
        return f"{bit_rate / 1_000_000:.2f} Mb/s"
    return f"{bit_rate / 1000:.0f} kb/s"


def format_default(info: Info) -> str:
    """Format Info as a readable report.

    Sections:
    - General container information
    - One block per video, audio and text track
    - Chapters of every menu
    """
    lines = []
    general = info.general

    lines.append("=" * 70)
    lines.append(f"File: {os.path.basename(general.complete_name)}")
    lines.append("=" * 70)

    lines.append("")
    lines.append("## GENERAL")
    lines.append(f"  Format:       {general.format or 'N/A'}")
    lines.append(f"  Duration:     {encode(general.duration)}")
    lines.append(f"  Size:         {general.file_size} bytes")
    lines.append(f"  Bit rate:     {_format_bit_rate(general.overall_bit_rate)}")
    if general.title:
        lines.append(f"  Title:        {general.title}")
    if general.encoded_date != ZERO_TIME:
        lines.append(f"  Encoded:      {general.encoded_date.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    if general.encoded_application:
        lines.append(f"  Application:  {general.encoded_application}")
    if general.encoded_library:
        lines.append(f"  Library:      {general.encoded_library}")

    for index, video in enumerate(info.video_tracks, 1):
        lines.append("")
        lines.append(f"## VIDEO #{index}")
        lines.append(f"  Codec:        {video.format} {video.format_profile}".rstrip())
        lines.append(f"  Resolution:   {video.resolution or 'N/A'}")
        lines.append(f"  Frame rate:   {video.frame_rate:.3f} fps ({video.frame_rate_mode or 'N/A'})")
        lines.append(f"  Bit depth:    {video.bit_depth or 'N/A'}")
        if video.is_3d:
            lines.append("  3D:           yes")

    for index, audio in enumerate(info.audio_tracks, 1):
        lines.append("")
        lines.append(f"## AUDIO #{index}")
        lines.append(f"  Codec:        {audio.format} {audio.format_additional_features}".rstrip())
        lines.append(f"  Channels:     {audio.channels} ({audio.channel_layout or 'N/A'})")
        lines.append(f"  Sample rate:  {audio.sampling_rate} Hz")
        lines.append(f"  Language:     {audio.language or 'N/A'}")

    for index, text in enumerate(info.text_tracks, 1):
        lines.append("")
        lines.append(f"## TEXT #{index}")
        lines.append(f"  Format:       {text.format}")
        lines.append(f"  Language:     {text.language or 'N/A'}")
        if text.forced:
            lines.append("  Forced:       yes")

    for menu in info.menu_tracks:
        lines.append("")
        lines.append(f"## CHAPTERS (menu {menu.order})")
        if not menu.entries:
            lines.append("  None")
        for entry in menu.entries:
            lines.append(
                f"  {entry.start_time_str} - {entry.end_time_str}  "
                f"[{entry.language or '--'}] {entry.title}"
            )

    return "\n".join(lines)
