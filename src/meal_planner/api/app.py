"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict, is_dataclass

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_planner.api.routes import router as api_router
from meal_planner.api.usda_proxy import router as usda_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.domain.errors import (
    FoodNotFound,
    InsufficientProfileData,
    PersistenceFailure,
    ProfileNotFound,
    UpstreamUnavailable,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(api_router)
    app.include_router(usda_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(InsufficientProfileData)
    async def insufficient_profile(
        request: Request, exc: InsufficientProfileData
    ) -> JSONResponse:
        return JSONResponse(
            {"error": exc.message, "missingFields": list(exc.missing_fields)},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(ProfileNotFound)
    @app.exception_handler(FoodNotFound)
    async def not_found(request: Request, exc: LookupError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_unavailable(
        request: Request, exc: UpstreamUnavailable
    ) -> JSONResponse:
        logger.warning("Upstream %s unavailable: %s", exc.source, exc.message)
        return JSONResponse(
            {"error": exc.message, "source": exc.source},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    @app.exception_handler(PersistenceFailure)
    async def persistence_failure(
        request: Request, exc: PersistenceFailure
    ) -> JSONResponse:
        logger.warning("Persistence failure on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            {
                "error": exc.message,
                "retryable": exc.retryable,
                "payload": _payload_document(exc.payload),
            },
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return app


def _payload_document(payload: object) -> object:
    if payload is None:
        return None
    to_document = getattr(payload, "to_document", None)
    if callable(to_document):
        return to_document()
    if is_dataclass(payload) and not isinstance(payload, type):
        return asdict(payload)
    return payload
