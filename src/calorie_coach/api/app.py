"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorie_coach.api.auth import router as auth_router
from calorie_coach.api.dashboard import router as dashboard_router
from calorie_coach.api.dev import router as dev_router
from calorie_coach.api.foods import router as foods_router
from calorie_coach.api.profile import router as profile_router
from calorie_coach.app_logging import configure_logging
from calorie_coach.containers import AppContainer
from calorie_coach.domain.errors import TransportError

TRANSPORT_ERROR_MESSAGE = "The nutrition service is unavailable. Please try again."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.session_controller.start()
        except Exception:
            logger.exception("Failed to start session controller")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(foods_router)
    app.include_router(dashboard_router)
    if container.settings.dev_routes_enabled:
        app.include_router(dev_router)

    @app.exception_handler(TransportError)
    async def transport_error_handler(
        request: Request, exc: TransportError
    ) -> JSONResponse:
        logger.error("Provider call failed on %s: %s", request.url.path, exc)
        detail = TRANSPORT_ERROR_MESSAGE
        if container.settings.environment == "local":
            detail = f"{detail} (debug: {exc})"
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": detail, "retry": True},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
