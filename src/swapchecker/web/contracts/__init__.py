"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
"""

from swapchecker.web.contracts.quotes import (
    MultiQuoteResponse,
    PairsResponse,
    QuoteRequest,
    QuoteResponse,
    TradingPair,
)
from swapchecker.web.contracts.swaps import (
    SwapHistoryResponse,
    SwapRecordResponse,
    SwapRequestBody,
    SwapResponse,
)
from swapchecker.web.contracts.users import OnboardRequest, UserResponse

__all__ = [
    # Quote contracts
    "QuoteRequest",
    "QuoteResponse",
    "MultiQuoteResponse",
    "TradingPair",
    "PairsResponse",
    # User contracts
    "OnboardRequest",
    "UserResponse",
    # Swap contracts
    "SwapRequestBody",
    "SwapResponse",
    "SwapRecordResponse",
    "SwapHistoryResponse",
]
