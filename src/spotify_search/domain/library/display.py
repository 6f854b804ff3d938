"""
Display helpers for search results.
"""

from typing import Optional

from .models import Album, SearchResult, Track

RESULT_HEADER = "COLLECTION:   TRACK  |  ARTISTS"
RESULT_RULE = "-" * len(RESULT_HEADER)
COLLECTION_NAME_WIDTH = 30


def get_artist_names(track: Track) -> list[str]:
    return [artist.name for artist in track.artists]


def get_thumbnail_url(album: Album, fallback: Optional[str] = None) -> Optional[str]:
    """Pick the smallest album image (lowest height), or the fallback."""
    if not album.images:
        return fallback
    return min(album.images, key=lambda image: image.height).url


def truncate_chars(value: str, max_chars: int) -> str:
    """Truncate text to max_chars characters, ellipsis included.

    Raises:
        ValueError: If max_chars is smaller than the ellipsis

    Examples:
        >>> truncate_chars("My long playlist name", 10)
        'My long...'
    """
    if max_chars < 3:
        raise ValueError("Can't truncate to fewer than 3 chars.")
    if len(value) <= max_chars:
        return value
    return f"{value[:max_chars - 3].rstrip()}..."


def format_result(result: SearchResult) -> str:
    """Format a result as a single CLI line."""
    artists = get_artist_names(result.track)
    artists_label = ", ".join(artists) if artists else "-"
    collection = truncate_chars(result.collection.name, COLLECTION_NAME_WIDTH)
    return f"{collection}:   {result.track.name}  |  {artists_label}"
