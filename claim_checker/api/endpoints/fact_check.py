"""Fact-checking API endpoints."""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...domain.models.errors import EmptyInputError, NoCandidatesFoundError
from ...domain.models.verdict import Verdict
from ...domain.reference_data import EXAMPLE_TEXT
from ...domain.services.fact_checking_service import FactCheckingService
from ...infrastructure.dependencies import get_fact_checking_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fact-check", tags=["fact-check"])


class TextCheckRequest(BaseModel):
    """Request model for text fact-checking."""

    text: str = Field(..., description="Text to fact-check")


class TextCheckResponse(BaseModel):
    """Response model for text fact-checking."""

    summary: Dict[str, int] = Field(..., description="Number of claims per status")
    verdicts: List[Verdict] = Field(..., description="Verdicts in input order")


class ExampleResponse(BaseModel):
    """Response model for the example text."""

    text: str


@router.post("/text", response_model=TextCheckResponse)
async def check_text(
    request: TextCheckRequest,
    service: FactCheckingService = Depends(get_fact_checking_service),
) -> TextCheckResponse:
    """Check facts in text input.

    Args:
        request: Text check request
        service: Fact checking service

    Returns:
        Verdicts for the extracted claims
    """
    try:
        report = await service.check_text(request.text)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoCandidatesFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error in fact-checking: {type(e).__name__}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Ein Fehler ist aufgetreten: {str(e)}")

    return TextCheckResponse(**report.to_dict())


@router.get("/example", response_model=ExampleResponse)
async def get_example() -> ExampleResponse:
    """Return a sample text covering every known claim."""
    return ExampleResponse(text=EXAMPLE_TEXT)
