"""
Conversion of wire models into sanitized domain models.

Known export anomalies are repaired here rather than treated as errors:
- playlist items with "track": null are dummy entries and are dropped
- tracks without an artist still carry one artist stub with an empty name
"""

from typing import Iterable

from .models import Album, Artist, Image, Track, TrackMeta
from .schema import RawAlbum, RawArtist, RawTrack, RawTrackItem


def sanitize_artists(raw_artists: Iterable[RawArtist]) -> tuple[Artist, ...]:
    """Drop empty-named artist stubs, keeping export order."""
    return tuple(Artist(name=artist.name) for artist in raw_artists if artist.name != "")


def sanitize_album(raw_album: RawAlbum) -> Album:
    return Album(
        name=raw_album.name,
        images=tuple(
            Image(height=image.height, width=image.width, url=image.url)
            for image in raw_album.images
        ),
    )


def sanitize_track(raw_track: RawTrack) -> Track:
    return Track(
        uri=raw_track.uri,
        name=raw_track.name,
        album=sanitize_album(raw_track.album),
        artists=sanitize_artists(raw_track.artists),
    )


def sanitize_items(raw_items: Iterable[RawTrackItem]) -> tuple[TrackMeta, ...]:
    """Convert a collection's raw items into positioned track metas.

    Null-track items are dropped before numbering, so positions count
    surviving items only (1..N).

    Args:
        raw_items: Items in export order

    Returns:
        Tuple of TrackMeta with positions 1..N
    """
    surviving = (item for item in raw_items if item.track is not None)
    return tuple(
        TrackMeta(
            track=sanitize_track(item.track),
            added_at=item.added_at,
            position=position,
        )
        for position, item in enumerate(surviving, start=1)
    )
