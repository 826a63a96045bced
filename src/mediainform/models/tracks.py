"""Typed records for General, Video, Audio and Text tracks.

Every numeric, boolean and date field always holds a value. When MediaInfo
omits a field or reports something unparsable the zero value is kept.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from mediainform.utils.coerce import ZERO_TIME


class General(BaseModel):
    """Container-level information (the General track)."""

    model_config = ConfigDict(frozen=True)

    unique_id: str = ""
    audio_count: int = 0
    video_count: int = 0
    text_count: int = 0
    menu_count: int = 0
    file_extension: str = ""
    format: str = ""
    format_version: str = ""
    file_size: int = 0
    duration: float = 0.0
    overall_bit_rate: float = 0.0
    frame_rate: float = 0.0
    frame_count: int = 0
    is_streamable: bool = False
    encoded_date: datetime = ZERO_TIME
    file_created_date: datetime = ZERO_TIME
    file_modified_date: datetime = ZERO_TIME
    encoded_application: str = ""
    encoded_library: str = ""
    encoded_library_version: str = ""
    title: str = ""
    complete_name: str = ""


class Video(BaseModel):
    """Video track information."""

    model_config = ConfigDict(frozen=True)

    stream_order: int = 0
    id: int = 0
    unique_id: str = ""
    format: str = ""
    format_profile: str = ""
    format_level: str = ""
    format_tier: str = ""
    codec_id: str = ""
    duration: float = 0.0
    bit_rate: float = 0.0
    width: int = 0
    height: int = 0
    sampled_width: int = 0
    sampled_height: int = 0
    pixel_aspect_ratio: float = 0.0
    display_aspect_ratio: float = 0.0
    frame_rate_mode: str = ""
    frame_rate: float = 0.0
    frame_count: int = 0
    color_space: str = ""
    chroma_subsampling: str = ""
    bit_depth: int = 0
    stream_size: int = 0
    stream_size_proportion: float = 0.0
    encoded_library: str = ""
    encoded_library_name: str = ""
    encoded_library_version: str = ""
    encoded_library_settings: str = ""
    default: bool = False
    forced: bool = False
    is_3d: bool = False
    title: str = ""

    @property
    def resolution(self) -> str | None:
        """Return resolution as WxH string."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None


class Audio(BaseModel):
    """Audio track information."""

    model_config = ConfigDict(frozen=True)

    stream_order: int = 0
    id: int = 0
    unique_id: str = ""
    format: str = ""
    format_commercial: str = ""
    format_additional_features: str = ""
    codec_id: str = ""
    duration: float = 0.0
    bit_rate: float = 0.0
    channels: int = 0
    channel_positions: str = ""
    channel_layout: str = ""
    samples_per_frame: int = 0
    sampling_rate: int = 0
    sampling_count: int = 0
    frame_rate: float = 0.0
    frame_count: int = 0
    compression_mode: str = ""
    stream_size: int = 0
    stream_size_proportion: float = 0.0
    language: str = ""
    default: bool = False
    forced: bool = False
    title: str = ""


class Text(BaseModel):
    """Text (subtitle) track information."""

    model_config = ConfigDict(frozen=True)

    order: int = 0
    stream_order: int = 0
    id: int = 0
    unique_id: str = ""
    format: str = ""
    codec_id: str = ""
    duration: float = 0.0
    bit_rate: float = 0.0
    frame_count: int = 0
    element_count: int = 0
    stream_size: int = 0
    language: str = ""
    default: bool = False
    forced: bool = False
    title: str = ""
