"""
Health check endpoints that report the lexical database status.
"""

from fastapi import APIRouter, Depends

from lexilookup.api.deps import get_engine
from lexilookup.engine import EngineHandle, status_text

router = APIRouter()


@router.get("/")
def health_check():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/database")
def database_health(engine: EngineHandle = Depends(get_engine)):
    """Database status as seen by the lookup engine."""
    return {
        "status": "healthy" if engine.enabled else "unhealthy",
        "database": {
            "path": engine.db_path,
            "meaning_count": engine.meaning_count,
            "error": engine.error,
        },
        "status_text": status_text(engine),
    }
