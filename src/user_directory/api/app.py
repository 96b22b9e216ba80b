"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_directory.api.errors import register_exception_handlers
from user_directory.api.users import router as users_router
from user_directory.app_logging import configure_logging
from user_directory.containers import AppContainer
from user_directory.services.seed import seed_sample_users


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_sample_users:
            try:
                seed_sample_users(state_container.user_service)
            except Exception:
                logger.exception("Failed to seed sample users")
        yield
        await state_container.close_resources()

    app = FastAPI(title="User Directory", lifespan=lifespan)
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
