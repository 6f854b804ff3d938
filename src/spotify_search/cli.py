"""
Spotify Search CLI - Entry point

Searches a spotify-backup export for tracks, either printing results to
the terminal or serving them through the web UI.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from spotify_search.core import config
from spotify_search.core.console import print_error, print_line
from spotify_search.core.output import setup_loguru
from spotify_search.domain.library import (
    PlaylistDirectoryError,
    format_result,
    search,
)
from spotify_search.domain.library.display import RESULT_HEADER, RESULT_RULE


def run_search(library_path: Path, keywords: List[str]) -> int:
    """Run a search and print one line per result.

    Args:
        library_path: Folder containing the spotify-backup export
        keywords: Keywords that must all match the title or an artist

    Returns:
        Exit code (0 for success, 1 if the playlists cannot be listed)
    """
    try:
        results = search(
            library_path, keywords, on_error=lambda error: print_error(str(error))
        )
    except PlaylistDirectoryError as e:
        logger.error(str(e))
        print_error(f"Error: {e}", style="red")
        return 1

    print_line(RESULT_HEADER)
    print_line(RESULT_RULE)
    for result in results:
        print_line(format_result(result))
    return 0


def run_web(library_path: Path, host: str, port: int) -> int:
    """Serve the web UI and JSON API with uvicorn.

    The library path is handed to the app through the environment, where
    the backend's config loader picks it up.
    """
    import uvicorn

    os.environ[config.LIBRARY_PATH_ENV] = str(library_path)
    logger.info(f"Serving {library_path} on http://{host}:{port}")
    print_line(f"Listening on http://{host}:{port}")
    uvicorn.run("web.backend.main:app", host=host, port=port, reload=False)
    return 0


def build_parser(cfg: config.Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spotify-search",
        description="Search for tracks in JSON files produced by spotify-backup.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )

    # Shared library path option
    path_parser = argparse.ArgumentParser(add_help=False)
    path_parser.add_argument(
        "-p",
        "--path",
        dest="library_path",
        metavar="LIBRARY_PATH",
        default=cfg.library.path,
        help="Path of folder containing Spotify backup (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    search_parser = subparsers.add_parser(
        "search", parents=[path_parser], help="Search tracks and print results"
    )
    search_parser.add_argument(
        "keywords",
        nargs="+",
        metavar="KEYWORDS",
        help="Keywords that must all be part of the track's title or artists.",
    )

    web_parser = subparsers.add_parser(
        "web", parents=[path_parser], help="Serve the search web UI"
    )
    web_parser.add_argument("--host", default=cfg.web.host, help="Bind address")
    web_parser.add_argument("--port", type=int, default=cfg.web.port, help="Bind port")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the spotify-search command."""
    cfg = config.load_config()
    args = build_parser(cfg).parse_args(argv)

    level = "DEBUG" if args.verbose else cfg.logging.level
    setup_loguru(
        config.get_log_file_path(cfg),
        level=level,
        console_output=args.verbose or cfg.logging.console_output,
    )

    library_path = Path(args.library_path).expanduser()

    if args.subcommand == "search":
        sys.exit(run_search(library_path, args.keywords))
    elif args.subcommand == "web":
        sys.exit(run_web(library_path, args.host, args.port))


if __name__ == "__main__":
    main()
