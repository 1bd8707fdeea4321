"""In-memory swap session: one user store, one set of quote sources."""

import logging
from typing import Optional

from swapchecker.config import Settings, get_settings
from swapchecker.ledger.users import UserStore
from swapchecker.routing.base import QuoteAggregator, QuoteSource
from swapchecker.routing.factory import create_aggregator
from swapchecker.routing.mock import build_simulated_books
from swapchecker.services.swap_executor import SwapExecutor

logger = logging.getLogger(__name__)


class SwapSession:
    """Everything a swap needs, created once and passed by reference.

    Sources are fixed for the life of the session.
    """

    def __init__(
        self,
        sources: Optional[list[QuoteSource]] = None,
        users: Optional[UserStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.users = users if users is not None else UserStore()
        self.aggregator: QuoteAggregator = create_aggregator(
            sources if sources is not None else build_simulated_books(),
            slippage=self.settings.default_slippage,
        )
        self.executor = SwapExecutor(
            self.users,
            self.aggregator,
            lock_timeout=self.settings.lock_timeout_seconds,
        )
        logger.info(
            f"Session ready with {len(self.aggregator.sources)} source(s), "
            f"network {self.settings.supported_network}"
        )

    @property
    def sources(self) -> list[QuoteSource]:
        return self.aggregator.sources
