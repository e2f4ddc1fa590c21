"""Reference fact endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException

from ...domain.models.reference_fact import ReferenceFact
from ...domain.reference_data import REFERENCE_FACTS, get_reference_fact

router = APIRouter(prefix="/reference-facts", tags=["reference-facts"])


@router.get("", response_model=List[ReferenceFact])
async def list_reference_facts() -> List[ReferenceFact]:
    """List all reference facts."""
    return list(REFERENCE_FACTS)


@router.get("/{key}", response_model=ReferenceFact)
async def read_reference_fact(key: str) -> ReferenceFact:
    """Get a single reference fact by its key."""
    fact = get_reference_fact(key)
    if fact is None:
        raise HTTPException(status_code=404, detail=f"Reference fact not found: {key}")
    return fact
