"""
Search across the library and every playlist of an exported snapshot.

Expected layout of a library root:

    <root>/tracks.json          saved tracks (JSON array of items)
    <root>/playlists/*.json     one document per playlist

Every call re-reads and re-parses all files; nothing is cached.
"""

from pathlib import Path
from typing import Callable, Optional, Sequence

from loguru import logger

from .exceptions import LibraryFileError, PlaylistDirectoryError, ReadError
from .matching import search_in_tracks
from .models import LIBRARY_COLLECTION, Collection, SearchResult, TrackMeta
from .sanitize import sanitize_items
from .schema import decode_library, decode_playlist

LIBRARY_TRACKS_FILENAME = "tracks.json"
PLAYLISTS_DIRNAME = "playlists"
PLAYLIST_SUFFIX = ".json"

ErrorCallback = Callable[[LibraryFileError], None]


def read_document(path: Path) -> str:
    """Read a JSON document as text.

    Raises:
        ReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e


def load_library_tracks(library_root: Path) -> tuple[TrackMeta, ...]:
    """Load and sanitize the library tracks file.

    Raises:
        ReadError: If the file cannot be read
        DecodeError: If the content does not match the library schema
    """
    path = library_root / LIBRARY_TRACKS_FILENAME
    raw_items = decode_library(read_document(path), path)
    return sanitize_items(raw_items)


def load_playlist(path: Path) -> tuple[Collection, tuple[TrackMeta, ...]]:
    """Load and sanitize one playlist file.

    Raises:
        ReadError: If the file cannot be read
        DecodeError: If the content does not match the playlist schema
    """
    raw_playlist = decode_playlist(read_document(path), path)
    collection = Collection(name=raw_playlist.name, uri=raw_playlist.uri)
    return collection, sanitize_items(raw_playlist.tracks.items)


def list_playlist_files(library_root: Path) -> list[Path]:
    """List playlist documents in a stable (sorted by name) order.

    Directories and files without a .json extension are ignored.

    Raises:
        PlaylistDirectoryError: If the playlist directory cannot be listed
    """
    playlist_dir = library_root / PLAYLISTS_DIRNAME
    try:
        entries = sorted(playlist_dir.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise PlaylistDirectoryError(playlist_dir, e) from e

    return [
        entry
        for entry in entries
        if entry.suffix == PLAYLIST_SUFFIX and entry.is_file()
    ]


def _report(error: LibraryFileError, on_error: Optional[ErrorCallback]) -> None:
    logger.warning(str(error))
    if on_error is not None:
        on_error(error)


def search(
    library_root: Path | str,
    keywords: Sequence[str],
    on_error: Optional[ErrorCallback] = None,
) -> list[SearchResult]:
    """Search the library then every playlist for matching tracks.

    A library or playlist file that cannot be read or decoded is reported
    (logged, and passed to on_error) and contributes no results; the
    other collections are still searched.

    Args:
        library_root: Folder containing tracks.json and playlists/
        keywords: Keywords that must all match the title or an artist
        on_error: Optional callback receiving each per-file error

    Returns:
        Library results first, then playlist results in enumeration
        order, each group ordered by position

    Raises:
        PlaylistDirectoryError: If the playlist directory cannot be listed
    """
    library_root = Path(library_root)
    results: list[SearchResult] = []

    try:
        library_tracks = load_library_tracks(library_root)
    except LibraryFileError as e:
        _report(e, on_error)
    else:
        results.extend(search_in_tracks(LIBRARY_COLLECTION, library_tracks, keywords))

    playlist_files = list_playlist_files(library_root)
    loaded = 0
    for path in playlist_files:
        try:
            collection, track_metas = load_playlist(path)
        except LibraryFileError as e:
            _report(e, on_error)
            continue
        loaded += 1
        results.extend(search_in_tracks(collection, track_metas, keywords))

    logger.debug(
        f"Searched {library_root} for {list(keywords)}: {len(results)} results "
        f"({loaded}/{len(playlist_files)} playlists loaded)"
    )
    return results
