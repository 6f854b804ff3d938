"""
Wire schema of the exported library JSON.

These pydantic models mirror the export as-is, anomalies included (null
tracks, artist stubs with empty names). They are only consumed by the
sanitizer; nothing else should import them.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import DecodeError


class RawArtist(BaseModel):
    name: str

    model_config = {"frozen": True}


class RawImage(BaseModel):
    height: int
    width: int
    url: str

    model_config = {"frozen": True}


class RawAlbum(BaseModel):
    name: str
    images: list[RawImage]

    model_config = {"frozen": True}


class RawTrack(BaseModel):
    uri: str
    name: str
    album: RawAlbum
    artists: list[RawArtist]

    model_config = {"frozen": True}


class RawTrackItem(BaseModel):
    added_at: str
    track: Optional[RawTrack] = None  # null for dummy playlist entries

    model_config = {"frozen": True}


class RawTracksPage(BaseModel):
    items: list[RawTrackItem]

    model_config = {"frozen": True}


class RawPlaylist(BaseModel):
    uri: str = ""  # Missing from older exports
    name: str
    tracks: RawTracksPage

    model_config = {"frozen": True}


_library_adapter = TypeAdapter(list[RawTrackItem])


def decode_library(content: str | bytes, path: Path) -> list[RawTrackItem]:
    """Decode a library tracks document (a JSON array of items).

    Raises:
        DecodeError: If content is not JSON or does not match the schema
    """
    try:
        return _library_adapter.validate_json(content)
    except ValidationError as e:
        raise DecodeError(path, e) from e


def decode_playlist(content: str | bytes, path: Path) -> RawPlaylist:
    """Decode a playlist document.

    Raises:
        DecodeError: If content is not JSON or does not match the schema
    """
    try:
        return RawPlaylist.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(path, e) from e
