"""Menu (chapter) models."""

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """A single chapter.

    ``end_time_str`` is always ``encode(end_time)``; an entry ends where the
    next one starts, and the last entry ends at the file's duration.
    """

    model_config = ConfigDict(frozen=True)

    start_time: float = 0.0
    start_time_str: str = ""
    end_time: float = 0.0
    end_time_str: str = ""
    language: str = ""
    title: str = ""


class Menu(BaseModel):
    """A Menu track: ordered chapters covering the file."""

    model_config = ConfigDict(frozen=True)

    order: int = 0
    duration: float = 0.0
    entries: list[Entry] = Field(default_factory=list)
