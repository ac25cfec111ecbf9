from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from lexilookup.api.deps import get_engine
from lexilookup.engine import EngineHandle, copy, query

router = APIRouter()


class CopyRequest(BaseModel):
    definition: str = ""


@router.get("")
def lookup(q: str = Query(""), engine: EngineHandle = Depends(get_engine)):
    """Look up a word: exact matches first, prefix suggestions otherwise."""
    results = query(engine, q)
    return {
        "query": q,
        "results": [record.to_dict() for record in results],
        "count": len(results),
    }


@router.post("/copy")
def copy_definition(req: CopyRequest):
    """Copy a definition taken from a result payload to the clipboard."""
    return {"copied": copy(req.definition)}
