import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from lexilookup.api.deps import init_engine
from lexilookup.api.routes import health as health_router
from lexilookup.api.routes import lookup

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = init_engine()
    if not engine.enabled:
        logger.warning(
            "Dictionary database unavailable (%s). "
            "The application will start but lookups will not work.",
            engine.error,
        )
    yield


app = FastAPI(
    title="Dictionary Lookup",
    description="Look up word definitions and synonyms",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(lookup.router, prefix="/api/lookup", tags=["lookup"])
app.include_router(health_router.router, prefix="/api/health", tags=["health"])


@app.get("/")
def root():
    return {
        "message": "Dictionary Lookup API",
        "version": "1.0.0",
        "endpoints": {
            "lookup": "/api/lookup?q={word}",
            "copy": "/api/lookup/copy",
            "health": "/api/health/database",
        },
    }


@app.get("/health")
def health():
    """Basic health endpoint."""
    return {"status": "healthy"}
