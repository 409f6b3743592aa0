"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import datetime
from typing import Callable, Optional

from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.security import IdentityProvider, StaticTokenIdentityProvider
from app.pickem.data_service import PickDataService
from app.pickem.unlock import UnlockConfig, utc_now
from app.services.pick_session_service import PickSessionRegistry


def create_app(data_service: Optional[PickDataService] = None, identity_provider: Optional[IdentityProvider] = None,
               clock: Callable[[], datetime.datetime] = utc_now,
               unlock_config: Optional[UnlockConfig] = None, ) -> FastAPI:
    """Build the API.

    Args:
        data_service: Storage backend; defaults to the SQL service on
            ``settings.DATABASE_URL``.
        identity_provider: Token resolver; defaults to ``API_TOKENS``.
        clock: Source of "now" for pick stamping and visibility.
        unlock_config: Unlock rule; defaults to the configured one.
    """
    configure_logging()

    if data_service is None:
        from app.db.session import build_engine
        from app.services.sql_data_service import SQLPickDataService

        data_service = SQLPickDataService(build_engine())

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="College-football pick'em: weekly pick sessions and pick visibility.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    app.state.data_service = data_service
    app.state.identity_provider = identity_provider or StaticTokenIdentityProvider(settings.API_TOKENS)
    app.state.clock = clock
    app.state.session_registry = PickSessionRegistry(data_service,
                                                     unlock_config=unlock_config or UnlockConfig.from_settings(),
                                                     clock=clock, submit_timeout=settings.SUBMIT_TIMEOUT_SECONDS,
                                                     idle_timeout=settings.SESSION_IDLE_TIMEOUT_SECONDS, )

    register_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "CFB Pick'em API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "pickem-api",
            "version": settings.VERSION
        }

    return app
