from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from web.backend.routers import search

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

app = FastAPI(title="Spotify Search Web API", version="1.0.0")

app.include_router(search.router, prefix="/api", tags=["search"])
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
