from pydantic import BaseModel


class SearchResponseItem(BaseModel):
    title: str
    artists: list[str]
    uri: str
    collection: str
    collection_uri: str
    position: int
    album: str
    thumbnail_url: str

    model_config = {"frozen": True}


class SearchResponse(BaseModel):
    items: list[SearchResponseItem]
    total: int  # Match count before the page size cap
