"""FastAPI application serving jokes and quotes."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from joker.config import get_settings
from joker.handlers import setup_routes
from joker.repository import LLMRepository, QuoteRepository
from joker.services import ContentService

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the upstream clients once per process and closes them on shutdown.
    """
    settings = get_settings()
    logger.info("Starting application...")

    quotes_client = httpx.AsyncClient(timeout=settings.upstream_timeout)
    quote_repo = QuoteRepository(settings, quotes_client)
    llm_repo = LLMRepository(settings)
    content_service = ContentService(settings, quote_repo, llm_repo)
    logger.info(f"Content service initialized (LLM model: {settings.llm_model})")

    app.state.workflow_data = {
        "settings": settings,
        "content_service": content_service,
    }

    yield

    logger.info("Shutting down...")
    await quotes_client.aclose()
    await llm_repo.close()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Joker",
    description="Random joke or inspirational quote",
    lifespan=lifespan,
)
setup_routes(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("joker.main:app", host="0.0.0.0", port=8000)
