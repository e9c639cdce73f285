"""
FastAPI application entrypoint.

Creates and configures the FastAPI application with:
  - Lifespan management (logging, Notion client)
  - API router registration
  - CORS middleware
  - Custom exception handlers
  - Health check endpoint
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router as gallery_router
from app.core.config import settings
from app.core.lifespan import lifespan
from app.core.logging import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Application factory — creates and configures the FastAPI instance."""

    application = FastAPI(
        title="Gallery Service",
        description=(
            "Serves gallery items sourced from a Notion database. Records are "
            "fetched on every request, normalised into gallery cards, and "
            "filtered, searched and paginated in memory."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ───────────────────────────────────────────────
    application.include_router(gallery_router, prefix="/api")

    # ── Health Check ─────────────────────────────────────────
    @application.get(
        "/health",
        tags=["Health"],
        summary="Service health check",
        status_code=status.HTTP_200_OK,
    )
    async def health_check():
        """Return service health status."""
        return {"status": "healthy", "service": "gallery-service"}

    # ── Exception Handlers ───────────────────────────────────
    @application.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all handler to prevent stack traces from leaking to clients."""
        logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal server error occurred."},
        )

    return application


# Create the app instance — referenced by uvicorn as app.main:app
app = create_app()
