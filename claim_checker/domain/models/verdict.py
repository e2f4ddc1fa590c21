"""Domain models for verdicts and related entities."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class VerdictStatus(str, Enum):
    """Possible classification outcomes."""

    VERIFIED = "verified"  # Claim matches the reference data
    DISPUTED = "disputed"  # Claim deviates from or cannot be checked against the reference data
    FALSE = "false"  # Claim contradicts the reference data

    @property
    def label(self) -> str:
        """Badge text shown to users."""
        return {
            VerdictStatus.VERIFIED: "✅ Verifiziert",
            VerdictStatus.DISPUTED: "⚠️ Umstritten",
            VerdictStatus.FALSE: "❌ Falsch",
        }[self]


class TrustTier(str, Enum):
    """Human-readable reliability tiers for sources."""

    HIGHLY_TRUSTWORTHY = "highly trustworthy"  # >= 0.9
    TRUSTWORTHY = "trustworthy"  # 0.7 - 0.89
    USE_WITH_CAUTION = "use with caution"  # < 0.7

    @property
    def label(self) -> str:
        """German display label."""
        return {
            TrustTier.HIGHLY_TRUSTWORTHY: "Sehr vertrauenswürdig",
            TrustTier.TRUSTWORTHY: "Vertrauenswürdig",
            TrustTier.USE_WITH_CAUTION: "Mit Vorsicht zu genießen",
        }[self]


def trust_tier(trust_score: float) -> TrustTier:
    """Map a trust score (0-1) to its tier."""
    if trust_score >= 0.9:
        return TrustTier.HIGHLY_TRUSTWORTHY
    elif trust_score >= 0.7:
        return TrustTier.TRUSTWORTHY
    else:
        return TrustTier.USE_WITH_CAUTION


class Source(BaseModel):
    """Attribution attached to a verdict."""

    name: str = Field(..., description="Name of the source")
    url: str = Field(..., description="Reference URL of the source")
    trust_score: float = Field(..., ge=0.0, le=1.0, description="Source reliability (0-1)")
    year: int = Field(..., description="Year of the referenced data")

    @computed_field
    @property
    def trust_tier(self) -> TrustTier:
        """Tier derived from the trust score."""
        return trust_tier(self.trust_score)

    class Config:
        """Pydantic model configuration."""
        frozen = True


class TemporalAssessment(BaseModel):
    """How current the data mentioned in a claim is."""

    data_year: int
    age: int
    is_outdated: bool
    message: str

    class Config:
        """Pydantic model configuration."""
        frozen = True


class Verdict(BaseModel):
    """Classification result for one candidate."""

    claim: str = Field(..., description="The original claim text")
    status: VerdictStatus = Field(..., description="Classification status")
    temporal: Optional[TemporalAssessment] = Field(None, description="Age of the data, if a year was mentioned")
    interpretation: str = Field(..., min_length=1, description="Explanation of the verdict")
    correction: Optional[str] = Field(None, description="Corrected statement, if the claim is wrong")
    sources: List[Source] = Field(default_factory=list, description="Sources backing the verdict")

    class Config:
        """Pydantic model configuration."""
        frozen = True  # Immutable model
        json_schema_extra = {
            "example": {
                "claim": "Deutschland hat 83 Millionen Einwohner",
                "status": "verified",
                "temporal": None,
                "interpretation": "Die Angabe ist korrekt. Deutschland hat etwa 83,2 Millionen Einwohner (Stand 2023).",
                "correction": None,
                "sources": [
                    {
                        "name": "Statistisches Bundesamt",
                        "url": "destatis.de",
                        "trust_score": 0.95,
                        "year": 2023,
                        "trust_tier": "highly trustworthy",
                    }
                ],
            }
        }
