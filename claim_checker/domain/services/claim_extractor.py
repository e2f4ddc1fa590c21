"""Extraction of checkable claim candidates from free text."""

import logging
import re
from typing import List, Pattern, Tuple

from ..models.candidate import Candidate

logger = logging.getLogger(__name__)

# Sentences are the runs between terminators; consecutive terminators form one boundary.
SENTENCE_PATTERN = re.compile(r"[^.!?]+")

MIN_CANDIDATE_LENGTH = 10

# Word and digit classes are ASCII only: "mehr Öl als" is not a comparative.
WORD = r"[A-Za-z0-9_]+"

CLAIM_PATTERNS: Tuple[Pattern[str], ...] = (
    # Number with unit: "83 Millionen", "3,5%", "200 €"
    re.compile(r"[0-9]+(?:,[0-9]+)?(?:\.[0-9]+)?\s*(?:Millionen|Milliarden|Prozent|%|€|Dollar|EUR|USD)", re.IGNORECASE),
    # Superlatives
    re.compile(r"(?:bevölkerungsreichste|größte|kleinste|höchste|niedrigste|meiste|wenigste)\s+" + WORD, re.IGNORECASE),
    # Comparatives
    re.compile(r"mehr\s+" + WORD + r"\s+als", re.IGNORECASE),
    re.compile(r"weniger\s+" + WORD + r"\s+als", re.IGNORECASE),
)


def looks_like_claim(sentence: str) -> bool:
    """Check whether a sentence matches any of the claim patterns."""
    return any(pattern.search(sentence) for pattern in CLAIM_PATTERNS)


class ClaimExtractor:
    """Splits text into sentences and keeps the ones that look like statistical claims."""

    def __init__(self, max_facts_per_check: int = 10):
        """Initialize the extractor.

        Args:
            max_facts_per_check: Maximum number of candidates returned per text
        """
        if max_facts_per_check < 1:
            raise ValueError("max_facts_per_check must be at least 1")
        self.max_facts_per_check = max_facts_per_check

    def extract(self, text: str) -> List[Candidate]:
        """Extract claim candidates in input order.

        Args:
            text: Arbitrary input text

        Returns:
            At most ``max_facts_per_check`` candidates; sentences beyond the cap are dropped
        """
        candidates: List[Candidate] = []

        for match in SENTENCE_PATTERN.finditer(text or ""):
            raw = match.group(0)
            sentence = raw.strip()
            if len(sentence) <= MIN_CANDIDATE_LENGTH or not looks_like_claim(sentence):
                continue

            start = match.start() + (len(raw) - len(raw.lstrip()))
            candidates.append(Candidate(text=sentence, span=(start, start + len(sentence))))

            if len(candidates) >= self.max_facts_per_check:
                logger.debug(f"✂️ Candidate cap of {self.max_facts_per_check} reached, ignoring the rest")
                break

        logger.info(f"📝 Extracted {len(candidates)} candidates")
        return candidates
