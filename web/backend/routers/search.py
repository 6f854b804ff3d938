from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from spotify_search.core.config import Config
from spotify_search.domain.library import (
    PlaylistDirectoryError,
    SearchResult,
    get_artist_names,
    get_thumbnail_url,
)
from spotify_search.domain.library import search as search_library
from ..deps import get_config, get_library_path
from ..schemas import SearchResponse, SearchResponseItem

router = APIRouter()


def to_response_item(result: SearchResult, fallback_thumbnail_url: str) -> SearchResponseItem:
    """Pure function - flatten a search result for the JSON API."""
    track = result.track
    return SearchResponseItem(
        title=track.name,
        artists=get_artist_names(track),
        uri=track.uri,
        collection=result.collection.name,
        collection_uri=result.collection.uri,
        position=result.position,
        album=track.album.name,
        thumbnail_url=get_thumbnail_url(track.album, fallback_thumbnail_url),
    )


# Plain def: each request runs one full synchronous search in the threadpool
@router.get("/search", response_model=SearchResponse)
def search_tracks(
    q: str,
    library_path: Path = Depends(get_library_path),
    config: Config = Depends(get_config),
):
    keywords = q.split()
    try:
        results = search_library(library_path, keywords)
    except PlaylistDirectoryError as e:
        logger.error(str(e))
        raise HTTPException(503, "Library export is not available")

    logger.info(f"Search {keywords!r}: {len(results)} results")
    return SearchResponse(
        total=len(results),
        items=[
            to_response_item(result, config.web.fallback_thumbnail_url)
            for result in results[: config.web.page_size]
        ],
    )
