"""
Keyword matching of sanitized tracks.
"""

from typing import Iterable, Sequence

from .models import Collection, SearchResult, Track, TrackMeta
from .normalize import normalize_keyword


def match_track(track: Track, keywords: Sequence[str]) -> bool:
    """Check whether a track satisfies every keyword.

    Each keyword must be contained in the track title or in at least one
    artist name; different keywords may be satisfied by different
    artists. An empty keyword list matches every track.

    Args:
        track: Sanitized track
        keywords: Raw user keywords (normalized here)

    Returns:
        True if all keywords match
    """
    if not keywords:
        return True

    track_name = normalize_keyword(track.name)
    artist_names = [normalize_keyword(artist.name) for artist in track.artists]

    def contains_keyword(raw_keyword: str) -> bool:
        keyword = normalize_keyword(raw_keyword)
        if keyword in track_name:
            return True
        return any(keyword in artist_name for artist_name in artist_names)

    return all(contains_keyword(keyword) for keyword in keywords)


def search_in_tracks(
    collection: Collection,
    track_metas: Iterable[TrackMeta],
    keywords: Sequence[str],
) -> list[SearchResult]:
    """Match one collection's tracks, keeping their collection order."""
    return [
        SearchResult(collection=collection, track_meta=track_meta)
        for track_meta in track_metas
        if match_track(track_meta.track, keywords)
    ]
