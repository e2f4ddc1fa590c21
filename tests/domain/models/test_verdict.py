"""Tests for verdict models."""

import pytest
from pydantic import ValidationError

from claim_checker.domain.models.fact_check_report import FactCheckReport
from claim_checker.domain.models.verdict import Source, TrustTier, Verdict, VerdictStatus, trust_tier


@pytest.mark.parametrize(
    "score, tier",
    [
        (1.0, TrustTier.HIGHLY_TRUSTWORTHY),
        (0.95, TrustTier.HIGHLY_TRUSTWORTHY),
        (0.9, TrustTier.HIGHLY_TRUSTWORTHY),
        (0.89, TrustTier.TRUSTWORTHY),
        (0.85, TrustTier.TRUSTWORTHY),
        (0.7, TrustTier.TRUSTWORTHY),
        (0.69, TrustTier.USE_WITH_CAUTION),
        (0.0, TrustTier.USE_WITH_CAUTION),
    ],
)
def test_trust_tier_boundaries(score, tier):
    """Test tier derivation at the boundaries."""
    assert trust_tier(score) == tier
    assert trust_tier(score) == trust_tier(score)


def test_source_serializes_tier():
    """Test that the derived tier is part of the serialized source."""
    source = Source(name="Statistikamt Nord", url="statistik-nord.de", trust_score=0.9, year=2023)

    data = source.model_dump(mode="json")

    assert data["trust_tier"] == "highly trustworthy"
    assert source.trust_tier.label == "Sehr vertrauenswürdig"


def test_source_rejects_invalid_trust_score():
    """Test that trust scores outside 0-1 are rejected."""
    with pytest.raises(ValidationError):
        Source(name="X", url="x", trust_score=1.5, year=2023)


def test_verdict_requires_interpretation():
    """Test that a verdict never has a blank interpretation."""
    with pytest.raises(ValidationError):
        Verdict(claim="Irgendwas", status=VerdictStatus.DISPUTED, interpretation="")


def test_verdict_is_immutable():
    """Test that verdicts cannot be changed after creation."""
    verdict = Verdict(claim="Irgendwas", status=VerdictStatus.DISPUTED, interpretation="Keine Quelle")

    with pytest.raises(ValidationError):
        verdict.status = VerdictStatus.VERIFIED


def test_report_summary():
    """Test the per-status counts of a report."""
    report = FactCheckReport(
        verdicts=[
            Verdict(claim="a", status=VerdictStatus.VERIFIED, interpretation="ok"),
            Verdict(claim="b", status=VerdictStatus.VERIFIED, interpretation="ok"),
            Verdict(claim="c", status=VerdictStatus.DISPUTED, interpretation="unklar"),
            Verdict(claim="d", status=VerdictStatus.FALSE, interpretation="falsch"),
        ]
    )

    assert report.summary() == {'total': 4, 'verified': 2, 'disputed': 1, 'false': 1}
    data = report.to_dict()
    assert [v['claim'] for v in data['verdicts']] == ["a", "b", "c", "d"]
    assert data['verdicts'][3]['status'] == "false"
