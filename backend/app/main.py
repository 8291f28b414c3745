"""Store Admin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StoreAdminError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, media host client and token verifier initialized on startup via
      the lifespan context manager, each from explicit settings

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: StoreAdminError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
    - /api/stores registered before /api/{store_id}/... so "stores" is never read
      as a store id
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import (
    billboards, categories, colors, health, products, sizes, stores,
)
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.database import init_db
from app.infrastructure.identity import init_identity
from app.infrastructure.media_host import init_media_host
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_media_host(
        settings.cloudinary_cloud_name,
        settings.cloudinary_api_key,
        settings.cloudinary_api_secret,
        max_retries=settings.media_delete_max_retries,
        base_delay_ms=settings.media_delete_base_delay_ms,
        max_delay_ms=settings.media_delete_max_delay_ms,
    )
    init_identity(
        settings.auth_jwt_key,
        settings.auth_jwt_algorithms,
        settings.auth_jwt_issuer,
    )
    logger.info("Store Admin API started")
    yield
    logger.info("Store Admin API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="Store Admin API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(stores.router)
app.include_router(billboards.router)
app.include_router(categories.router)
app.include_router(sizes.router)
app.include_router(colors.router)
app.include_router(products.router)

register_error_handlers(app)
