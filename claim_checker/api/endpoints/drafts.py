"""Draft persistence endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...domain.services.draft_service import DraftService
from ...infrastructure.dependencies import get_draft_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drafts", tags=["drafts"])


class DraftRequest(BaseModel):
    """Request model for saving a draft."""

    content: str = Field(..., description="Current input text")


class DraftResponse(BaseModel):
    """Response model for a draft."""

    user_id: str
    content: Optional[str] = None


@router.get("/{user_id}", response_model=DraftResponse)
async def read_draft(
    user_id: str,
    service: DraftService = Depends(get_draft_service),
) -> DraftResponse:
    """Return the saved draft of a user."""
    try:
        content = await service.load(user_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DraftResponse(user_id=user_id, content=content)


@router.put("/{user_id}", status_code=202, response_model=DraftResponse)
async def update_draft(
    user_id: str,
    request: DraftRequest,
    service: DraftService = Depends(get_draft_service),
) -> DraftResponse:
    """Schedule a debounced save of the user's draft."""
    try:
        await service.update(user_id, request.content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DraftResponse(user_id=user_id, content=request.content)
