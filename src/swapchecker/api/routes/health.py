"""Health check endpoints."""

from fastapi import APIRouter, Depends

from swapchecker.session import SwapSession
from swapchecker.web.controllers.deps import get_session

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "swapchecker"}


@router.get("/health/detailed")
async def detailed_health(session: SwapSession = Depends(get_session)):
    """Detailed health check with configuration and session info."""
    return {
        "status": "healthy",
        "service": "swapchecker",
        "version": "0.1.0",
        "config": session.settings.get_safe_dict(),
        "sources": [
            {"name": source.name, "network": source.network.value}
            for source in session.sources
        ],
        "users": len(session.users),
    }
