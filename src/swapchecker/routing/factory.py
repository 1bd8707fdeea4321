"""Factory for creating quote sources and aggregators."""

import logging
from decimal import Decimal
from typing import Optional

from swapchecker.config import get_settings
from swapchecker.routing.base import QuoteAggregator, QuoteSource
from swapchecker.routing.mock import build_simulated_book, build_simulated_books

logger = logging.getLogger(__name__)


def create_aggregator(
    sources: list[QuoteSource],
    slippage: Optional[Decimal] = None,
) -> QuoteAggregator:
    """Create an aggregator over the given sources.

    Args:
        sources: Quote sources, consulted in this order
        slippage: Placeholder slippage (uses settings default if not provided)
    """
    if slippage is None:
        slippage = get_settings().default_slippage

    aggregator = QuoteAggregator(slippage=slippage)
    for source in sources:
        aggregator.add_source(source)
        logger.info(f"Added {source.name} ({source.network}) source")

    return aggregator


def create_default_aggregator() -> QuoteAggregator:
    """Create aggregator with all simulated sources."""
    aggregator = create_aggregator(build_simulated_books())
    logger.info(f"Created default aggregator with {len(aggregator.sources)} sources")
    return aggregator


def create_minimal_aggregator(names: Optional[list[str]] = None) -> QuoteAggregator:
    """Create aggregator with a subset of simulated sources (for testing)."""
    names = names or ["Uniswap"]
    return create_aggregator([build_simulated_book(name) for name in names])
