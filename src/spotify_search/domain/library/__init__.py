"""Library domain - exported snapshot loading and keyword search.

This domain handles:
- Track, collection and result models
- Sanitization of the exported JSON
- Keyword normalization and matching
- Search across the library and playlists
"""

# Models
from .models import (
    LIBRARY_COLLECTION,
    Album,
    Artist,
    Collection,
    Image,
    SearchResult,
    Track,
    TrackMeta,
)

# Errors
from .exceptions import (
    DecodeError,
    LibraryFileError,
    ParseError,
    PlaylistDirectoryError,
    ReadError,
    SpotifySearchError,
)

# Normalization and matching
from .normalize import normalize_keyword
from .matching import match_track, search_in_tracks

# Search
from .search_engine import search

# Display
from .display import (
    format_result,
    get_artist_names,
    get_thumbnail_url,
    truncate_chars,
)

__all__ = [
    # Models
    "LIBRARY_COLLECTION",
    "Album",
    "Artist",
    "Collection",
    "Image",
    "SearchResult",
    "Track",
    "TrackMeta",
    # Errors
    "DecodeError",
    "LibraryFileError",
    "ParseError",
    "PlaylistDirectoryError",
    "ReadError",
    "SpotifySearchError",
    # Normalization and matching
    "normalize_keyword",
    "match_track",
    "search_in_tracks",
    # Search
    "search",
    # Display
    "format_result",
    "get_artist_names",
    "get_thumbnail_url",
    "truncate_chars",
]
