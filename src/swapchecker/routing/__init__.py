"""Routing module for swap quote aggregation.

Sources (simulated):
- Uniswap, CowSwap, Sushi: Ethereum
- PancakeSwap: BNB Chain
- Matcha: Polygon
"""

from swapchecker.routing.base import (
    DEFAULT_SLIPPAGE,
    InsufficientLiquidityError,
    PairNotSupportedError,
    PairQuote,
    QuoteAggregator,
    QuoteBook,
    QuoteError,
    QuoteSource,
    SwapResult,
)
from swapchecker.routing.factory import (
    create_aggregator,
    create_default_aggregator,
    create_minimal_aggregator,
)
from swapchecker.routing.mock import build_simulated_book, build_simulated_books

__all__ = [
    # Base classes
    "PairQuote",
    "QuoteSource",
    "QuoteBook",
    "QuoteAggregator",
    "SwapResult",
    "DEFAULT_SLIPPAGE",
    # Errors
    "QuoteError",
    "PairNotSupportedError",
    "InsufficientLiquidityError",
    # Factory functions
    "create_aggregator",
    "create_default_aggregator",
    "create_minimal_aggregator",
    "build_simulated_book",
    "build_simulated_books",
]
