"""Service for running the extraction and classification pipeline."""

import asyncio
import logging
from datetime import date
from typing import Awaitable, Callable, Optional

from ..models.errors import EmptyInputError, NoCandidatesFoundError
from ..models.fact_check_report import FactCheckReport
from .claim_classifier import ClaimClassifier
from .claim_extractor import ClaimExtractor

logger = logging.getLogger(__name__)

# Simulated processing time before results are produced.
PROCESSING_DELAY_SECONDS = 1.5


class FactCheckingService:
    """Service for coordinating fact checking."""

    def __init__(
        self,
        extractor: Optional[ClaimExtractor] = None,
        classifier: Optional[ClaimClassifier] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the service.

        Args:
            extractor: Claim extractor (default configuration if omitted)
            classifier: Claim classifier (default configuration if omitted)
            sleep: Coroutine used for the simulated processing delay
        """
        self.extractor = extractor or ClaimExtractor()
        self.classifier = classifier or ClaimClassifier()
        self._sleep = sleep
        logger.info("🔧 FactCheckingService initialized")

    async def check_text(self, text: str, current_year: Optional[int] = None) -> FactCheckReport:
        """Fact check all claims found in a text.

        Args:
            text: Text to check
            current_year: Year used for temporal assessments (defaults to today)

        Returns:
            Report with one verdict per extracted candidate

        Raises:
            EmptyInputError: If the text is blank
            NoCandidatesFoundError: If the text contains no checkable claims
        """
        if not text or not text.strip():
            raise EmptyInputError()

        logger.info(f"🔍 Starting fact check for text: {text[:100]}...")
        await self._sleep(PROCESSING_DELAY_SECONDS)

        candidates = self.extractor.extract(text)
        if not candidates:
            logger.info("🤷 No checkable claims found")
            raise NoCandidatesFoundError()

        if current_year is None:
            current_year = date.today().year

        report = FactCheckReport(
            verdicts=[self.classifier.classify(candidate, current_year) for candidate in candidates]
        )
        logger.info(
            f"✅ Fact check complete: {report.total} claims, {report.verified} verified, "
            f"{report.disputed} disputed, {report.false} false"
        )
        return report
