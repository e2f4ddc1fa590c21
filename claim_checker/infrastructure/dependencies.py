"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from ..domain.services.claim_classifier import ClaimClassifier
from ..domain.services.claim_extractor import ClaimExtractor
from ..domain.services.draft_service import DraftService
from ..domain.services.fact_checking_service import FactCheckingService
from .settings import CheckerConfig
from .storage.file_draft_store import FileDraftStore

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[CheckerConfig] = None):
        """Initialize service container.

        Args:
            config: Checker configuration (read from the environment if omitted)
        """
        self.config = config or CheckerConfig.from_env()
        self._services: Dict[str, Any] = {}
        self._setup_services()

    def _setup_services(self):
        """Setup all services and their dependencies."""
        logger.info("🔧 Setting up service container...")

        extractor = ClaimExtractor(max_facts_per_check=self.config.max_facts_per_check)
        classifier = ClaimClassifier(outdated_threshold_years=self.config.outdated_threshold_years)
        draft_store = FileDraftStore(self.config.draft_directory)

        self._services = {
            'fact_checking_service': FactCheckingService(extractor, classifier),
            'draft_service': DraftService(draft_store, debounce_seconds=self.config.draft_debounce_seconds),
        }

        logger.info("✅ Service container setup completed")

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_fact_checking_service(self) -> FactCheckingService:
        """Get fact checking service."""
        return self.get('fact_checking_service')

    def get_draft_service(self) -> DraftService:
        """Get draft service."""
        return self.get('draft_service')


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance.

    Returns:
        Service container instance
    """
    return ServiceContainer()


# Convenience functions for FastAPI dependency injection
def get_fact_checking_service() -> FactCheckingService:
    """FastAPI dependency for fact checking service."""
    return get_service_container().get_fact_checking_service()


def get_draft_service() -> DraftService:
    """FastAPI dependency for draft service."""
    return get_service_container().get_draft_service()
