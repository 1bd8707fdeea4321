"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swapchecker.config import get_settings
from swapchecker.session import SwapSession

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    session: SwapSession = app.state.session
    logger.info(f"Serving {len(session.sources)} quote source(s)")
    yield
    logger.info(f"Session closed with {len(session.users)} user(s)")


def create_app(session: Optional[SwapSession] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session: Session to serve (a fresh one with simulated sources if not provided)
    """
    settings = get_settings()

    app = FastAPI(
        title="Swap Checker API",
        description="Best-price stablecoin swaps across simulated liquidity sources",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.session = session or SwapSession(settings=settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from swapchecker.api.routes import health
    from swapchecker.web.controllers import quotes_router, swaps_router, users_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(quotes_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(swaps_router, prefix="/api/v1")

    return app
