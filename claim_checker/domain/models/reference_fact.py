"""Domain model for reference facts."""

from pydantic import BaseModel, Field


class ReferenceFact(BaseModel):
    """A known-correct statistical datum."""

    key: str = Field(..., description="Canonical lowercase phrase identifying the fact")
    value: str = Field(..., description="Display value")
    year: int = Field(..., description="Year the data refers to")
    source: str = Field(..., description="Name of the publishing source")
    trust_score: float = Field(..., ge=0.0, le=1.0, description="Source reliability (0-1)")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        json_schema_extra = {
            "example": {
                "key": "deutschland einwohner",
                "value": "83.2 Millionen",
                "year": 2023,
                "source": "Statistisches Bundesamt",
                "trust_score": 0.95,
            }
        }
