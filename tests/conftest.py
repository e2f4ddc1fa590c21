"""Test configuration and common fixtures."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from claim_checker.api.app import app
from claim_checker.domain.services.claim_classifier import ClaimClassifier
from claim_checker.domain.services.claim_extractor import ClaimExtractor
from claim_checker.domain.services.draft_service import DraftService
from claim_checker.domain.services.fact_checking_service import FactCheckingService
from claim_checker.infrastructure.dependencies import get_draft_service, get_fact_checking_service
from claim_checker.infrastructure.storage.file_draft_store import FileDraftStore


async def no_sleep(seconds: float) -> None:
    """Skip the simulated processing delay."""


@pytest.fixture
def extractor() -> ClaimExtractor:
    """Provide an extractor with the default cap."""
    return ClaimExtractor()


@pytest.fixture
def classifier() -> ClaimClassifier:
    """Provide a classifier with the default staleness threshold."""
    return ClaimClassifier()


@pytest.fixture
def fact_checking_service(extractor: ClaimExtractor, classifier: ClaimClassifier) -> FactCheckingService:
    """Provide a fact checking service without the artificial delay."""
    return FactCheckingService(extractor, classifier, sleep=no_sleep)


@pytest.fixture
def draft_store(tmp_path) -> FileDraftStore:
    """Provide a draft store writing into a temporary directory."""
    return FileDraftStore(str(tmp_path / "drafts"))


@pytest_asyncio.fixture
async def draft_service(draft_store: FileDraftStore) -> DraftService:
    """Provide a draft service with a short debounce."""
    service = DraftService(draft_store, debounce_seconds=0.05)
    yield service
    await service.flush()


@pytest.fixture
def test_client(fact_checking_service: FactCheckingService, draft_store: FileDraftStore) -> TestClient:
    """Create a test client with test services."""
    drafts = DraftService(draft_store, debounce_seconds=60.0)
    app.dependency_overrides[get_fact_checking_service] = lambda: fact_checking_service
    app.dependency_overrides[get_draft_service] = lambda: drafts
    with TestClient(app) as client:
        yield client
        client.portal.call(drafts.flush)
    app.dependency_overrides.clear()
