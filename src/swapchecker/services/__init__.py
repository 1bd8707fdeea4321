"""Services that act on the ledger."""

from swapchecker.services.swap_executor import (
    InvalidSwapRequestError,
    SwapExecutor,
    SwapRecord,
    SwapRequest,
    SwapState,
    SwapStatus,
)

__all__ = [
    "InvalidSwapRequestError",
    "SwapExecutor",
    "SwapRecord",
    "SwapRequest",
    "SwapState",
    "SwapStatus",
]
