"""Pytest configuration and fixtures."""

import copy
import shutil
from typing import Any

import pytest

import mediainform.config as config_module
from mediainform.config import reset_config
from mediainform.exceptions import FileOpenError
from mediainform.providers.base import BaseProvider, ProviderHandle

# MediaInfo JSON for an HEVC + AAC 5.1 Matroska file with eight chapters.
# Chapter keys are deliberately out of order.
SAMPLE_REPORT: dict[str, Any] = {
    "creatingLibrary": {"name": "MediaInfoLib", "version": "20.09"},
    "media": {
        "@ref": "testdata/1_video_1_audio_1_menu.mkv",
        "track": [
            {
                "@type": "General",
                "UniqueID": "96343877327587173645643017013582379057",
                "VideoCount": "1",
                "AudioCount": "1",
                "MenuCount": "1",
                "FileExtension": "MKV",
                "Format": "Matroska",
                "Format_Version": "4",
                "FileSize": "8980",
                "Duration": "4086.355",
                "OverallBitRate": "18",
                "FrameRate": "23.976",
                "IsStreamable": "Yes",
                "Title": "This is the title",
                "Encoded_Date": "UTC 2020-10-20 17:38:13",
                "File_Created_Date": "UTC 2020-11-16 17:48:13.928",
                "File_Modified_Date": "UTC 2020-11-17 17:19:54.510",
                "File_Modified_Date_Local": "2020-11-17 18:19:54.510",
                "Encoded_Application": "mkvmerge v50.0.0 ('Awakenings') 64-bit",
                "Encoded_Library": "libebml v1.4.0 + libmatroska v1.6.2",
            },
            {
                "@type": "Video",
                "StreamOrder": "0",
                "ID": "1",
                "UniqueID": "4801514838969937575",
                "Format": "HEVC",
                "Format_Profile": "Main 10",
                "Format_Level": "4",
                "Format_Tier": "Main",
                "CodecID": "V_MPEGH/ISO/HEVC",
                "Duration": "4086.355000000",
                "Width": "1920",
                "Height": "1080",
                "Sampled_Width": "1920",
                "Sampled_Height": "1080",
                "PixelAspectRatio": "1.000",
                "DisplayAspectRatio": "1.778",
                "FrameRate_Mode": "CFR",
                "FrameRate": "23.976",
                "ColorSpace": "YUV",
                "ChromaSubsampling": "4:2:0",
                "BitDepth": "10",
                "Delay": "0.000",
                "Encoded_Library": "x265 - 2.5+48-bd438ce10843:[Windows][MSVC 1911][64 bit] 10bit",
                "Encoded_Library_Name": "x265",
                "Encoded_Library_Version": "2.5+48-bd438ce10843:[Windows][MSVC 1911][64 bit] 10bit",
                "Encoded_Library_Settings": "cpuid=1173503 / frame-threads=3 / wpp",
                "Default": "Yes",
                "Forced": "No",
            },
            {
                "@type": "Audio",
                "StreamOrder": "1",
                "ID": "2",
                "UniqueID": "14945515745438299057",
                "Format": "AAC",
                "Format_AdditionalFeatures": "LC",
                "CodecID": "A_AAC-2",
                "Duration": "0.000000000",
                "Channels": "6",
                "ChannelPositions": "Front: L C R, Side: L R, LFE",
                "ChannelLayout": "C L R Ls Rs LFE",
                "SamplesPerFrame": "1024",
                "SamplingRate": "48000",
                "SamplingCount": "196145040",
                "FrameRate": "46.875",
                "Compression_Mode": "Lossy",
                "Delay": "0.000",
                "Delay_Source": "Container",
                "StreamSize_Proportion": "0.00000",
                "Language": "en",
                "Default": "Yes",
                "Forced": "No",
            },
            {
                "@type": "Menu",
                "extra": {
                    "_00_33_14_450": "en:Chapter 05",
                    "_00_00_00_000": "en:Chapter 01",
                    "_01_06_51_257": "en:Chapter 08",
                    "_00_14_14_895": "en:Chapter 03",
                    "_00_01_47_607": "en:Chapter 02",
                    "_00_54_44_781": "en:Chapter 07",
                    "_00_22_41_234": "en:Chapter 04",
                    "_00_43_01_370": "en:Chapter 06",
                },
            },
        ],
    },
}

# (start_time_str, end_time_str, title) once sorted
SAMPLE_CHAPTERS = [
    ("00:00:00.000", "00:01:47.607", "Chapter 01"),
    ("00:01:47.607", "00:14:14.895", "Chapter 02"),
    ("00:14:14.895", "00:22:41.234", "Chapter 03"),
    ("00:22:41.234", "00:33:14.450", "Chapter 04"),
    ("00:33:14.450", "00:43:01.370", "Chapter 05"),
    ("00:43:01.370", "00:54:44.781", "Chapter 06"),
    ("00:54:44.781", "01:06:51.257", "Chapter 07"),
    ("01:06:51.257", "01:08:06.355", "Chapter 08"),
]


class FakeProvider(BaseProvider):
    """In-memory provider returning a canned report."""

    name = "fake"
    priority = 1

    def __init__(self, report: Any = None, loadable: bool = True) -> None:
        super().__init__()
        self.report = report if report is not None else copy.deepcopy(SAMPLE_REPORT)
        self.loadable = loadable
        self.opened: list[str] = []
        self.closed: list[str] = []

    @classmethod
    def is_available(cls) -> bool:
        return True

    def load(self) -> bool:
        self._loaded = self.loadable
        return self._loaded

    def open_file(self, path: str) -> ProviderHandle:
        self._ensure_loaded()
        if path.endswith("missing.mkv"):
            raise FileOpenError(path, "no such file")
        self.opened.append(path)
        return ProviderHandle(path=path)

    def inform(self, handle: ProviderHandle) -> Any:
        return self.report

    def close(self, handle: ProviderHandle) -> None:
        super().close(handle)
        self.closed.append(handle.path)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests away from user config files and MEDIAINFORM_* variables."""
    for key in ("PROVIDER", "MEDIAINFO_PATH", "TIMEOUT", "LIBRARY_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(f"MEDIAINFORM_{key}", raising=False)
    monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "config.yaml"])
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_report() -> dict[str, Any]:
    """A fresh copy of the sample MediaInfo report."""
    return copy.deepcopy(SAMPLE_REPORT)


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Provider serving the sample report."""
    return FakeProvider()


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if mediainfo is available."""
    return shutil.which("mediainfo") is not None
