import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.api.routers import analyze_router
from backend.api.routers.analyze import load_catalog

from partmatch import __version__

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - load the catalog on startup."""
    try:
        index = load_catalog()
        logger.info(f"Catalog ready: {index.entry_count} entries")
    except (FileNotFoundError, ValueError) as e:
        # Serve anyway; every mention resolves to No Match until a reload
        logger.warning(f"Failed to load catalog: {e}")

    yield  # Application runs here


app = FastAPI(title="Part Match", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.api.main:app", host="0.0.0.0", port=3001)
