"""Skills Agent - on-demand skill loading API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skills_agent.api import router
from skills_agent.config import get_settings
from skills_agent.dependencies import get_llm_provider, get_session_store, get_skill_registry
from skills_agent.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(settings.effective_log_level)

    provider = get_llm_provider()
    registry = get_skill_registry()

    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.env)
    logger.info("LLM Provider: %s (%s)", provider.provider_name, provider.model_name)
    logger.info("Skills available: %d", registry.skill_count)

    yield

    logger.info("Shutting down...")
    await get_session_store().close_all()
    logger.info("Shutdown complete")


settings = get_settings()

# Configure CORS based on environment
allowed_origins = ["*"] if settings.is_development else []

app = FastAPI(
    title=settings.app_name,
    description="LLM agent that loads skills on demand",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )
