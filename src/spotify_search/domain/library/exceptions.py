"""Library search exceptions for error handling."""

from pathlib import Path


class SpotifySearchError(Exception):
    """Base exception for library search operations."""

    pass


class LibraryFileError(SpotifySearchError):
    """Raised when a single library or playlist file cannot be loaded."""

    def __init__(self, path: Path, cause: Exception, message: str | None = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(message or f"{self.describe()} {self.path.name}: {cause}")

    def describe(self) -> str:
        return "Could not load"


class ReadError(LibraryFileError):
    """Raised when a file cannot be read from disk."""

    def describe(self) -> str:
        return "Could not read"


class DecodeError(LibraryFileError):
    """Raised when file content is not valid JSON of the expected shape."""

    def describe(self) -> str:
        return "Could not parse"


# Name used by the sanitization layer
ParseError = DecodeError


class PlaylistDirectoryError(SpotifySearchError):
    """Raised when the playlist directory is missing or unreadable.

    Unlike per-file errors this aborts the whole search, since no
    playlist can be discovered.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not list playlists in {self.path}: {cause}")
