"""Normalize a raw MediaInfo report into an Info aggregate.

Tracks are dispatched on their ``@type``. General, Video, Audio and Text
tracks are mapped field by field through the tables below; Menu tracks go
through the chapter reconstructor. Any other track type is ignored.

All functions are pure (no I/O, no side effects).
"""

import logging
from collections.abc import Callable
from typing import Any

from mediainform.chapters import build_menu
from mediainform.models import Audio, General, Info, Menu, RawReport, RawTrack, Text, Video
from mediainform.utils.coerce import (
    parse_bool,
    parse_float32,
    parse_timestamp,
    parse_unsigned,
    to_lower_text,
    to_text,
)

logger = logging.getLogger(__name__)

# (attribute, provider key, coercer)
FieldMap = list[tuple[str, str, Callable[[Any], Any]]]

GENERAL_FIELDS: FieldMap = [
    ("unique_id", "UniqueID", to_text),
    ("audio_count", "AudioCount", parse_unsigned),
    ("video_count", "VideoCount", parse_unsigned),
    ("text_count", "TextCount", parse_unsigned),
    ("menu_count", "MenuCount", parse_unsigned),
    ("file_extension", "FileExtension", to_lower_text),
    ("format", "Format", to_text),
    ("format_version", "Format_Version", to_text),
    ("file_size", "FileSize", parse_unsigned),
    ("duration", "Duration", parse_float32),
    ("overall_bit_rate", "OverallBitRate", parse_float32),
    ("frame_rate", "FrameRate", parse_float32),
    ("frame_count", "FrameCount", parse_unsigned),
    ("is_streamable", "IsStreamable", parse_bool),
    ("encoded_date", "Encoded_Date", parse_timestamp),
    ("file_created_date", "File_Created_Date", parse_timestamp),
    ("file_modified_date", "File_Modified_Date", parse_timestamp),
    ("encoded_application", "Encoded_Application", to_text),
    ("encoded_library", "Encoded_Library", to_text),
    ("encoded_library_version", "Encoded_Library_Version", to_text),
    ("title", "Title", to_text),
]

VIDEO_FIELDS: FieldMap = [
    ("stream_order", "StreamOrder", parse_unsigned),
    ("id", "ID", parse_unsigned),
    ("unique_id", "UniqueID", to_text),
    ("format", "Format", to_text),
    ("format_profile", "Format_Profile", to_text),
    ("format_level", "Format_Level", to_text),
    ("format_tier", "Format_Tier", to_text),
    ("codec_id", "CodecID", to_text),
    ("duration", "Duration", parse_float32),
    ("bit_rate", "BitRate", parse_float32),
    ("width", "Width", parse_unsigned),
    ("height", "Height", parse_unsigned),
    ("sampled_width", "Sampled_Width", parse_unsigned),
    ("sampled_height", "Sampled_Height", parse_unsigned),
    ("pixel_aspect_ratio", "PixelAspectRatio", parse_float32),
    ("display_aspect_ratio", "DisplayAspectRatio", parse_float32),
    ("frame_rate_mode", "FrameRate_Mode", to_text),
    ("frame_rate", "FrameRate", parse_float32),
    ("frame_count", "FrameCount", parse_unsigned),
    ("color_space", "ColorSpace", to_text),
    ("chroma_subsampling", "ChromaSubsampling", to_text),
    ("bit_depth", "BitDepth", parse_unsigned),
    ("stream_size", "StreamSize", parse_unsigned),
    ("stream_size_proportion", "StreamSize_Proportion", parse_float32),
    ("encoded_library", "Encoded_Library", to_text),
    ("encoded_library_name", "Encoded_Library_Name", to_text),
    ("encoded_library_version", "Encoded_Library_Version", to_text),
    ("encoded_library_settings", "Encoded_Library_Settings", to_text),
    ("default", "Default", parse_bool),
    ("forced", "Forced", parse_bool),
    ("title", "Title", to_text),
]

AUDIO_FIELDS: FieldMap = [
    ("stream_order", "StreamOrder", parse_unsigned),
    ("id", "ID", parse_unsigned),
    ("unique_id", "UniqueID", to_text),
    ("format", "Format", to_text),
    ("format_commercial", "Format_Commercial_IfAny", to_text),
    ("format_additional_features", "Format_AdditionalFeatures", to_text),
    ("codec_id", "CodecID", to_text),
    ("duration", "Duration", parse_float32),
    ("bit_rate", "BitRate", parse_float32),
    ("channels", "Channels", parse_unsigned),
    ("channel_positions", "ChannelPositions", to_text),
    ("channel_layout", "ChannelLayout", to_text),
    ("samples_per_frame", "SamplesPerFrame", parse_unsigned),
    ("sampling_rate", "SamplingRate", parse_unsigned),
    ("sampling_count", "SamplingCount", parse_unsigned),
    ("frame_rate", "FrameRate", parse_float32),
    ("frame_count", "FrameCount", parse_unsigned),
    ("compression_mode", "Compression_Mode", to_text),
    ("stream_size", "StreamSize", parse_unsigned),
    ("stream_size_proportion", "StreamSize_Proportion", parse_float32),
    ("language", "Language", to_text),
    ("default", "Default", parse_bool),
    ("forced", "Forced", parse_bool),
    ("title", "Title", to_text),
]

TEXT_FIELDS: FieldMap = [
    ("order", "@typeorder", parse_unsigned),
    ("stream_order", "StreamOrder", parse_unsigned),
    ("id", "ID", parse_unsigned),
    ("unique_id", "UniqueID", to_text),
    ("format", "Format", to_text),
    ("codec_id", "CodecID", to_text),
    ("duration", "Duration", parse_float32),
    ("bit_rate", "BitRate", parse_float32),
    ("frame_count", "FrameCount", parse_unsigned),
    ("element_count", "ElementCount", parse_unsigned),
    ("stream_size", "StreamSize", parse_unsigned),
    ("language", "Language", to_text),
    ("default", "Default", parse_bool),
    ("forced", "Forced", parse_bool),
    ("title", "Title", to_text),
]


def map_fields(track: RawTrack, table: FieldMap) -> dict[str, Any]:
    """Coerce the fields listed in ``table`` from a raw track."""
    return {attr: coerce(track.get(key)) for attr, key, coerce in table}


def parse_general(track: RawTrack) -> General:
    """Build the General record."""
    values = map_fields(track, GENERAL_FIELDS)
    if not values["title"]:
        values["title"] = to_text(track.get("Movie"))
    return General(**values)


def parse_video(track: RawTrack) -> Video:
    """Build a Video record.

    The 3D flag is derived: a track is stereoscopic when MediaInfo
    reports a ``Multi_View_Count``.
    """
    values = map_fields(track, VIDEO_FIELDS)
    values["is_3d"] = bool(track.get("Multi_View_Count"))
    return Video(**values)


def parse_audio(track: RawTrack) -> Audio:
    """Build an Audio record."""
    return Audio(**map_fields(track, AUDIO_FIELDS))


def parse_text(track: RawTrack) -> Text:
    """Build a Text record."""
    return Text(**map_fields(track, TEXT_FIELDS))


def build_info(report: RawReport) -> Info:
    """Assemble the Info aggregate from a raw report.

    The General track is resolved first so every Menu gets the file's
    duration as its last chapter boundary, whatever the track order. If
    the report holds several General tracks the last one wins.
    """
    general = General()
    for track in report.tracks:
        if track.type == "General":
            general = parse_general(track)

    video_tracks: list[Video] = []
    audio_tracks: list[Audio] = []
    text_tracks: list[Text] = []
    menu_tracks: list[Menu] = []

    for track in report.tracks:
        if track.type == "General":
            continue
        elif track.type == "Video":
            video_tracks.append(parse_video(track))
        elif track.type == "Audio":
            audio_tracks.append(parse_audio(track))
        elif track.type == "Text":
            text_tracks.append(parse_text(track))
        elif track.type == "Menu":
            menu_tracks.append(build_menu(track, general.duration))
        else:
            logger.debug("Ignoring %r track", track.type)

    return Info(
        general=general,
        video_tracks=video_tracks,
        audio_tracks=audio_tracks,
        text_tracks=text_tracks,
        menu_tracks=menu_tracks,
    )


def normalize(report: RawReport, complete_name: str | None = None) -> Info:
    """Normalize a raw report, optionally stamping the file's absolute path.

    Args:
        report: Raw MediaInfo report
        complete_name: Absolute path to record as ``general.complete_name``

    Returns:
        Info aggregate
    """
    info = build_info(report)
    if complete_name is None:
        return info
    general = info.general.model_copy(update={"complete_name": complete_name})
    return info.model_copy(update={"general": general})
