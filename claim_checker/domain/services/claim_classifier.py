"""Classification of claim candidates against the known claim signatures."""

import logging
import re
from datetime import date
from typing import Optional, Sequence, Union

from ..models.candidate import Candidate
from ..models.verdict import TemporalAssessment, Verdict, VerdictStatus
from ..reference_data import CLAIM_SIGNATURES, NO_SOURCE_INTERPRETATION, ClaimSignature

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r"(?<![A-Za-z0-9_])(?:19|20)[0-9]{2}(?![A-Za-z0-9_])")


def assess_temporal(
    text: str,
    current_year: int,
    outdated_threshold_years: int = 2,
) -> Optional[TemporalAssessment]:
    """Assess how current the first year mentioned in a text is.

    Args:
        text: Claim text
        current_year: Year to measure the age against
        outdated_threshold_years: Age above which data counts as outdated

    Returns:
        Temporal assessment, or None if the text mentions no year
    """
    match = YEAR_PATTERN.search(text)
    if not match:
        return None

    data_year = int(match.group(0))
    age = current_year - data_year
    is_outdated = age > outdated_threshold_years
    if is_outdated:
        message = f"Diese Daten sind {age} Jahre alt. Aktuellere Zahlen könnten verfügbar sein."
    else:
        message = "Die Daten sind relativ aktuell."

    return TemporalAssessment(
        data_year=data_year,
        age=age,
        is_outdated=is_outdated,
        message=message,
    )


class ClaimClassifier:
    """Maps a candidate to exactly one verdict.

    Signatures are tried in order and the first match decides the verdict.
    Claims matching no signature are reported as disputed without sources.
    """

    def __init__(
        self,
        outdated_threshold_years: int = 2,
        signatures: Sequence[ClaimSignature] = CLAIM_SIGNATURES,
    ):
        self.outdated_threshold_years = outdated_threshold_years
        self.signatures = tuple(signatures)

    def find_signature(self, text: str) -> Optional[ClaimSignature]:
        """Return the first signature matching the text, if any."""
        lowered = text.lower()
        for signature in self.signatures:
            if signature.matches(lowered):
                return signature
        return None

    def classify(self, candidate: Union[Candidate, str], current_year: Optional[int] = None) -> Verdict:
        """Classify a single candidate.

        Args:
            candidate: Candidate or raw claim text
            current_year: Year used for the temporal assessment (defaults to today)

        Returns:
            Verdict for the candidate
        """
        text = candidate.text if isinstance(candidate, Candidate) else candidate
        if current_year is None:
            current_year = date.today().year

        temporal = assess_temporal(text, current_year, self.outdated_threshold_years)
        signature = self.find_signature(text)

        if signature is None:
            logger.info(f"❓ No signature matched: {text[:100]}")
            return Verdict(
                claim=text,
                status=VerdictStatus.DISPUTED,
                temporal=temporal,
                interpretation=NO_SOURCE_INTERPRETATION,
            )

        logger.info(f"🔍 Signature '{signature.name}' matched -> {signature.status.value}")
        return Verdict(
            claim=text,
            status=signature.status,
            temporal=temporal,
            interpretation=signature.interpretation,
            correction=signature.correction,
            sources=[signature.source.model_copy()],
        )
