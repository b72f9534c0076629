"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pay_enhancement.api.dependencies import get_engine
from pay_enhancement.api.errors import CalculationFailed
from pay_enhancement.api.routes import enhancements_router, health_router, pay_scales_router
from pay_enhancement.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup: build and check both reference tables once
    engine = get_engine()
    logger.info(
        "Loaded pay scales %s (%d grades) and %s (%d grades)",
        engine.historical.name,
        len(engine.historical),
        engine.current.name,
        len(engine.current),
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Pay Enhancement Estimator API",
        description="Disparity Reduction Allowance and ad-hoc increase estimates",
        version=settings.engine_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(CalculationFailed)
    async def calculation_failed_handler(
        request: Request, exc: CalculationFailed
    ) -> JSONResponse:
        """Return calculation errors as user-correctable 422s."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=exc.to_response_content(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(pay_scales_router, prefix="/api/v1")
    app.include_router(enhancements_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
