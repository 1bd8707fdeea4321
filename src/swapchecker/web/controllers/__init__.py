"""HTTP controllers for web API endpoints."""

from swapchecker.web.controllers.quotes import router as quotes_router
from swapchecker.web.controllers.swaps import router as swaps_router
from swapchecker.web.controllers.users import router as users_router

__all__ = [
    "quotes_router",
    "swaps_router",
    "users_router",
]
