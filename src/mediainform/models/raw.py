"""Raw MediaInfo report models.

These mirror the provider's JSON output (``mediainfo --Output=JSON``)::

    {"media": {"@ref": "/path/file.mkv", "track": [
        {"@type": "General", "Format": "Matroska", ...},
        {"@type": "Menu", "extra": {"_00_00_00_000": "en:Chapter 01", ...}}
    ]}}

Every field is a string, absent fields are simply missing.
"""

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from mediainform.exceptions import ReportDecodeError
from mediainform.utils.coerce import to_text


class RawTrack(BaseModel):
    """One element of the provider's ``media.track`` list."""

    type: str = ""
    # Every provider key except "@type" and "extra", including "@typeorder"
    attributes: dict[str, Any] = Field(default_factory=dict)
    extra: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_provider(cls, track: dict[str, Any]) -> "RawTrack":
        """Build a RawTrack from one provider track object."""
        attributes = {k: v for k, v in track.items() if k not in ("@type", "extra")}
        extra = track.get("extra") or {}
        if isinstance(extra, dict):
            extra = {str(k): to_text(v) for k, v in extra.items()}
        return cls.model_validate(
            {"type": to_text(track.get("@type")), "attributes": attributes, "extra": extra}
        )

    def get(self, name: str) -> Any:
        """Return a raw field, or None if the provider omitted it."""
        return self.attributes.get(name)


class RawReport(BaseModel):
    """A whole provider report for one file."""

    ref: str = ""
    tracks: list[RawTrack] = Field(default_factory=list)

    @classmethod
    def from_tree(cls, tree: Any) -> "RawReport":
        """Validate an already-deserialized JSON tree.

        Raises:
            ReportDecodeError: If the tree is not shaped like a MediaInfo report
        """
        if not isinstance(tree, dict):
            raise ReportDecodeError(f"Expected a JSON object, got {type(tree).__name__}")

        media = tree.get("media")
        if media is None:
            return cls()
        if not isinstance(media, dict):
            raise ReportDecodeError("'media' is not an object")

        tracks = media.get("track")
        if tracks is None:
            tracks = []
        if not isinstance(tracks, list):
            raise ReportDecodeError("'media.track' is not an array")

        try:
            raw_tracks = []
            for track in tracks:
                if not isinstance(track, dict):
                    raise ReportDecodeError("'media.track' contains a non-object element")
                raw_tracks.append(RawTrack.from_provider(track))
            return cls(ref=to_text(media.get("@ref")), tracks=raw_tracks)
        except ValidationError as e:
            raise ReportDecodeError(f"Invalid track in report: {e}") from e

    @classmethod
    def from_json(cls, text: str | bytes) -> "RawReport":
        """Parse provider JSON output.

        Raises:
            ReportDecodeError: If the text is not valid JSON or not a report
        """
        try:
            tree = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ReportDecodeError(f"Invalid JSON report: {e}") from e
        return cls.from_tree(tree)
