"""Domain model for fact checking reports."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .verdict import Verdict, VerdictStatus


@dataclass
class FactCheckReport:
    """Verdicts for all candidates of one text, in input order."""

    verdicts: List[Verdict] = field(default_factory=list)

    def _count(self, status: VerdictStatus) -> int:
        return sum(1 for verdict in self.verdicts if verdict.status == status)

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def verified(self) -> int:
        return self._count(VerdictStatus.VERIFIED)

    @property
    def disputed(self) -> int:
        return self._count(VerdictStatus.DISPUTED)

    @property
    def false(self) -> int:
        return self._count(VerdictStatus.FALSE)

    def summary(self) -> Dict[str, int]:
        """Counts per status."""
        return {
            'total': self.total,
            'verified': self.verified,
            'disputed': self.disputed,
            'false': self.false,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert FactCheckReport to dictionary format for API responses."""
        return {
            'summary': self.summary(),
            'verdicts': [verdict.model_dump(mode='json') for verdict in self.verdicts],
        }
