"""Domain model for extracted claim candidates."""

from typing import Tuple

from pydantic import BaseModel, Field


class Candidate(BaseModel):
    """A sentence of the input that looks like a statistical claim."""

    text: str = Field(..., description="Trimmed sentence text")
    span: Tuple[int, int] = Field(..., description="(start, end) character offsets in the input")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
