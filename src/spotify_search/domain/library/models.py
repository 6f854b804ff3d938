"""
Library domain models.

Contains the sanitized data structures for tracks, collections and search
results. Instances are built fresh for every search and never mutated.
"""

from dataclasses import dataclass

LIBRARY_COLLECTION_NAME = "Library"
LIBRARY_COLLECTION_URI = "spotify:library"  # Saved tracks have no natural uri


@dataclass(frozen=True)
class Artist:
    """A track artist. Never has an empty name once sanitized."""

    name: str


@dataclass(frozen=True)
class Image:
    """An album cover rendition."""

    height: int
    width: int
    url: str


@dataclass(frozen=True)
class Album:
    name: str
    images: tuple[Image, ...] = ()


@dataclass(frozen=True)
class Track:
    """Represents a streaming track.

    Artists keep the order of the export and may be empty when the track
    has no credited artist.
    """

    uri: str
    name: str
    album: Album
    artists: tuple[Artist, ...] = ()


@dataclass(frozen=True)
class TrackMeta:
    """A track as it appears within one collection."""

    track: Track
    added_at: str  # Opaque timestamp, kept as exported
    position: int  # 1-based rank among the collection's surviving items


@dataclass(frozen=True)
class Collection:
    """The Library or a playlist."""

    name: str
    uri: str

    @property
    def is_library(self) -> bool:
        return self.uri == LIBRARY_COLLECTION_URI


LIBRARY_COLLECTION = Collection(name=LIBRARY_COLLECTION_NAME, uri=LIBRARY_COLLECTION_URI)


@dataclass(frozen=True)
class SearchResult:
    """A matching track tagged with the collection it was found in."""

    collection: Collection
    track_meta: TrackMeta

    @property
    def track(self) -> Track:
        return self.track_meta.track

    @property
    def position(self) -> int:
        return self.track_meta.position
