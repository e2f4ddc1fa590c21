"""Configuration management for the claim checker."""

import logging
import os

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class CheckerConfig(BaseModel):
    """Configuration for fact checking and draft persistence."""

    max_facts_per_check: int = Field(default=10, ge=1, description="Maximum candidates classified per check")
    outdated_threshold_years: int = Field(default=2, ge=0, description="Age in years after which data is stale")
    draft_directory: str = Field(default=".drafts", description="Directory for saved drafts")
    draft_debounce_seconds: float = Field(default=1.0, ge=0.0, description="Delay before a draft is written")

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """Create configuration from environment variables."""
        values = {}
        env_map = {
            'max_facts_per_check': 'CLAIM_CHECKER_MAX_FACTS_PER_CHECK',
            'outdated_threshold_years': 'CLAIM_CHECKER_OUTDATED_THRESHOLD_YEARS',
            'draft_directory': 'CLAIM_CHECKER_DRAFT_DIR',
            'draft_debounce_seconds': 'CLAIM_CHECKER_DRAFT_DEBOUNCE_SECONDS',
        }
        for field_name, env_name in env_map.items():
            raw = os.getenv(env_name)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()

        config = cls(**values)
        logger.info(
            f"⚙️ Claim checker configured: max_facts_per_check={config.max_facts_per_check}, "
            f"outdated_threshold_years={config.outdated_threshold_years}"
        )
        return config
