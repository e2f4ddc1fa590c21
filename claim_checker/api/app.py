"""FastAPI application for the Claim Checker service."""

import contextlib
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()

from ..domain.reference_data import CLAIM_SIGNATURES, REFERENCE_FACTS
from ..infrastructure.dependencies import get_service_container
from .endpoints import drafts, fact_check, reference_facts

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    reference_facts: int
    claim_signatures: int


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application."""
    container = get_service_container()
    logger.info("🚀 Claim checker started")

    yield  # Application runs here

    # Shutdown: write drafts that are still waiting for their debounce timer
    failed = await container.get_draft_service().flush()
    if failed:
        logger.error(f"❌ Drafts lost on shutdown for users: {', '.join(failed)}")
    logger.info("👋 Claim checker stopped")


# Create FastAPI application
app = FastAPI(
    title="Claim Checker API",
    description="Checks statistical claims in German text against a fixed set of reference facts",
    version=VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(fact_check.router)
app.include_router(reference_facts.router)
app.include_router(drafts.router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        reference_facts=len(REFERENCE_FACTS),
        claim_signatures=len(CLAIM_SIGNATURES),
    )
