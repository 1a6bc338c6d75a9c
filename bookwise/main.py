"""FastAPI application factory and ASGI entry point for Bookwise."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from bookwise.adapters.storage.memory import InMemoryReadingListRepository
from bookwise.api.middleware.cors import PublicPathCORSMiddleware
from bookwise.api.routes.auth import router as auth_router
from bookwise.api.routes.books import router as books_router
from bookwise.api.routes.reading_lists import router as reading_lists_router
from bookwise.api.routes.recommendations import router as recommendations_router
from bookwise.config import Settings, get_settings
from bookwise.container import build_identity, build_recommendation_service
from bookwise.domain import catalog
from bookwise.domain.seed import mock_reading_lists
from bookwise.logging_config import configure_logging
from bookwise.ports.identity import IdentityPort
from bookwise.ports.llm import LLMPort
from bookwise.ports.reading_lists import ReadingListRepository
from bookwise.services.auth import AuthService
from bookwise.services.reading_lists import ReadingListService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info("Bookwise starting up...")
    logger.info("Catalog size: %d books", len(catalog.BOOKS))
    logger.info("LLM provider: %s", settings.llm_provider.value)
    logger.info("Identity provider: %s", settings.identity_provider.value)
    logger.info("Fallback marker mode: %s", settings.fallback_marker.value)
    yield
    logger.info("Bookwise shutting down...")


def create_app(
    settings: Settings | None = None,
    llm: LLMPort | None = None,
    identity: IdentityPort | None = None,
    reading_lists: ReadingListRepository | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Collaborators left as None are built from ``settings``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        description="Book catalog with AI recommendations and reading lists",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # ── State ──────────────────────────────────────
    application.state.settings = settings
    application.state.recommendation_service = build_recommendation_service(settings, llm)
    application.state.auth_service = AuthService(identity or build_identity(settings))
    application.state.reading_list_service = ReadingListService(
        reading_lists or InMemoryReadingListRepository(seed=mock_reading_lists())
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        PublicPathCORSMiddleware,
        public_paths={"/recommendations"},
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ─────────────────────────────────────
    application.include_router(auth_router)
    application.include_router(books_router)
    application.include_router(reading_lists_router)
    application.include_router(recommendations_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "bookwise"}

    return application


app = create_app()
