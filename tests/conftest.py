"""Shared fixtures for building throwaway spotify-backup exports."""

import json
from pathlib import Path
from typing import Any, Optional, Sequence

import pytest


class ExportBuilder:
    """Writes tracks.json and playlists/*.json under a root folder."""

    def __init__(self, root: Path):
        self.root = root
        self.playlists_dir = root / "playlists"
        self.playlists_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def track(
        name: str = "My track",
        artists: Sequence[str] = ("My artist",),
        uri: Optional[str] = None,
        album: str = "My album",
        images: Sequence[dict[str, Any]] = (),
    ) -> dict[str, Any]:
        return {
            "uri": uri or f"spotify:track:{name.lower().replace(' ', '-')}",
            "name": name,
            "album": {"name": album, "images": list(images)},
            "artists": [{"name": artist} for artist in artists],
        }

    @staticmethod
    def item(
        track: Optional[dict[str, Any]], added_at: str = "2010-08-23T10:33:01Z"
    ) -> dict[str, Any]:
        return {"added_at": added_at, "track": track}

    def write_library(self, items: list[dict[str, Any]]) -> Path:
        path = self.root / "tracks.json"
        path.write_text(json.dumps(items), encoding="utf-8")
        return path

    def write_playlist(
        self,
        filename: str,
        name: str,
        items: list[dict[str, Any]],
        uri: Optional[str] = None,
    ) -> Path:
        document = {
            "uri": uri or f"spotify:playlist:{Path(filename).stem}",
            "name": name,
            "tracks": {"items": items},
        }
        path = self.playlists_dir / filename
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    def write_raw(self, relative_path: str, content: str) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path


@pytest.fixture
def export(tmp_path: Path) -> ExportBuilder:
    """An empty export (library file not yet written, empty playlists dir)."""
    return ExportBuilder(tmp_path / "spotify-backup")


@pytest.fixture
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config/data dirs and the cwd at a temporary folder."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SPOTIFY_SEARCH_LIBRARY_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
