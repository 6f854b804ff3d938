"""
Tests for the spotify-search command line.
"""

import os
import sys
from unittest.mock import patch

import pytest
from loguru import logger

from spotify_search import cli


@pytest.fixture(autouse=True)
def restore_loguru():
    """cli.main() reconfigures loguru sinks; put the default one back."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def cli_export(export, isolated_dirs):
    t = export.track
    i = export.item
    export.write_library(
        [i(t("My track", ["My artist"])), i(t("Other", ["Someone"]))]
    )
    export.write_playlist(
        "road.json",
        "A very long road trip playlist name",
        [i(None), i(t("Track of my life", [""]))],
    )
    return export


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


def test_search_prints_results(cli_export, capsys):
    code = run_main(["search", "my", "track", "-p", str(cli_export.root)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "COLLECTION:   TRACK  |  ARTISTS",
        "-------------------------------",
        "Library:   My track  |  My artist",
        "A very long road trip playl...:   Track of my life  |  -",
    ]


def test_search_reports_bad_playlist_on_stderr(cli_export, capsys):
    cli_export.write_raw("playlists/broken.json", "{")

    code = run_main(["search", "other", "-p", str(cli_export.root)])

    captured = capsys.readouterr()
    assert code == 0
    assert "Library:   Other  |  Someone" in captured.out
    assert "broken.json" in captured.err


def test_search_fails_without_playlist_directory(cli_export, capsys):
    cli_export.playlists_dir.joinpath("road.json").unlink()
    cli_export.playlists_dir.rmdir()

    code = run_main(["search", "my", "-p", str(cli_export.root)])

    assert code == 1
    assert "Could not list playlists" in capsys.readouterr().err


def test_search_uses_configured_library_path(cli_export, monkeypatch, capsys):
    monkeypatch.setenv("SPOTIFY_SEARCH_LIBRARY_PATH", str(cli_export.root))

    code = run_main(["search", "someone"])

    assert code == 0
    assert "Library:   Other  |  Someone" in capsys.readouterr().out


def test_search_requires_keywords(isolated_dirs):
    assert run_main(["search"]) == 2


def test_search_writes_log_file(cli_export, isolated_dirs):
    run_main(["search", "my", "-p", str(cli_export.root)])

    assert (isolated_dirs / "data" / "spotify-search" / "spotify-search.log").exists()


def test_web_runs_uvicorn(cli_export, monkeypatch):
    monkeypatch.setenv("SPOTIFY_SEARCH_LIBRARY_PATH", "/elsewhere")

    with patch("uvicorn.run") as mock_run:
        code = run_main(["web", "-p", str(cli_export.root), "--port", "4040"])

    assert code == 0
    mock_run.assert_called_once_with(
        "web.backend.main:app", host="127.0.0.1", port=4040, reload=False
    )

    assert os.environ["SPOTIFY_SEARCH_LIBRARY_PATH"] == str(cli_export.root)
