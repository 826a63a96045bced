"""Main Info model."""

from pydantic import BaseModel, ConfigDict, Field

from .menu import Entry, Menu
from .tracks import Audio, General, Text, Video


class Info(BaseModel):
    """Normalized MediaInfo report for one file.

    This is the model returned by mediainform's entry points:

    - general: container-level information
    - video_tracks / audio_tracks / text_tracks: streams in provider order
    - menu_tracks: chapter menus, entries sorted by start time
    """

    model_config = ConfigDict(frozen=True)

    general: General = Field(default_factory=General)
    video_tracks: list[Video] = Field(default_factory=list)
    audio_tracks: list[Audio] = Field(default_factory=list)
    text_tracks: list[Text] = Field(default_factory=list)
    menu_tracks: list[Menu] = Field(default_factory=list)

    @property
    def path(self) -> str:
        """Return the absolute file path."""
        return self.general.complete_name

    @property
    def duration(self) -> float:
        """Return file duration in seconds."""
        return self.general.duration

    @property
    def has_chapters(self) -> bool:
        """Check if any menu carries chapter entries."""
        return any(menu.entries for menu in self.menu_tracks)

    @property
    def chapters(self) -> list[Entry]:
        """Return the entries of the first menu."""
        if not self.menu_tracks:
            return []
        return list(self.menu_tracks[0].entries)
