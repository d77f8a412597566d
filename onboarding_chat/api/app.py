"""FastAPI application factory.

Hosts the NiceGUI chat page and a health check. The onboarding logic itself
lives behind the configured backend URL.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from onboarding_chat.client.config import get_client_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_client_config()
    logger.info(f"Starting Onboarding Chat, backend at {config.api_base_url}")
    yield
    logger.info("Shutting down Onboarding Chat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Onboarding Chat",
        description="Conversational onboarding assistant for mock interviews.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "onboarding-chat"}

    return application
