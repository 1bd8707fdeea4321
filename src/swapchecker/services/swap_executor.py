"""Swap execution against the in-memory ledger.

Flow (per request):
1. Resolve the user by wallet address
2. Precheck the balance of from_token against the request amount
3. Ask the aggregator for the best quote across all sources
4. Debit from_token by the amount, credit to_token by the received amount

Any failure ends the swap with no balance mutation. Steps 1-4 run under the
wallet's lock so the precheck and the debit cannot interleave with another
swap on the same wallet.
"""

import logging
import time
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from swapchecker.assets import Token
from swapchecker.ledger.balances import InsufficientBalanceError
from swapchecker.ledger.users import UserStore
from swapchecker.routing.base import QuoteAggregator, SwapResult
from swapchecker.utils.locks import WalletLock

logger = logging.getLogger(__name__)


class InvalidSwapRequestError(ValueError):
    """The request itself is malformed."""

    code = "invalid_swap_request"


class SwapState(str, Enum):
    """Swap state machine states."""

    START = "start"
    USER_RESOLVED = "user_resolved"
    BALANCE_PRECHECKED = "balance_prechecked"
    QUOTE_OBTAINED = "quote_obtained"
    COMMITTED = "committed"
    FAILED = "failed"


class SwapStatus(str, Enum):
    """Final status of a recorded swap."""

    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class SwapRequest:
    """A user's request to swap amount of from_token into to_token."""

    wallet_address: str
    from_token: Token
    to_token: Token
    amount: Decimal

    def validate(self) -> None:
        """Raise InvalidSwapRequestError if the request is malformed."""
        if self.from_token == self.to_token:
            raise InvalidSwapRequestError(f"Cannot swap {self.from_token} for itself")
        if self.amount <= 0:
            raise InvalidSwapRequestError(f"Amount must be positive, got {self.amount}")


@dataclass
class SwapRecord:
    """History entry for one swap attempt by a known user."""

    request: SwapRequest
    status: SwapStatus
    result: Optional[SwapResult] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    created_at: float = field(default_factory=time.time)


class SwapExecutor:
    """Orchestrates swaps for users in a store using one aggregator."""

    def __init__(
        self,
        users: UserStore,
        aggregator: QuoteAggregator,
        lock_timeout: Optional[float] = 30.0,
    ):
        self.users = users
        self.aggregator = aggregator
        self.lock_timeout = lock_timeout
        self._history: dict[str, list[SwapRecord]] = {}

    def execute(self, request: SwapRequest) -> SwapResult:
        """Execute a swap.

        Returns:
            The winning quote, already applied to the user's balances

        Raises:
            InvalidSwapRequestError: If from_token == to_token or amount <= 0
            UserNotFoundError: If the wallet address is unknown
            InsufficientBalanceError: If the balance is below the amount
            PairNotSupportedError: If no source could quote the swap
        """
        request.validate()
        state = SwapState.START

        # Unknown wallets never get a lock
        self.users.require(request.wallet_address)

        with WalletLock(request.wallet_address, timeout=self.lock_timeout, operation="swap"):
            user = self.users.require(request.wallet_address)
            state = self._advance(request, state, SwapState.USER_RESOLVED)
            ledger = user.ledger
            before = ledger.snapshot()

            try:
                if not ledger.has_sufficient_balance(request.from_token, request.amount):
                    raise InsufficientBalanceError(
                        request.from_token,
                        ledger.balance_of(request.from_token),
                        request.amount,
                    )
                state = self._advance(request, state, SwapState.BALANCE_PRECHECKED)

                result = self.aggregator.best_quote(
                    request.from_token, request.to_token, request.amount
                )
                state = self._advance(request, state, SwapState.QUOTE_OBTAINED)

                ledger.debit(request.from_token, request.amount)
                ledger.credit(request.to_token, result.received_amount)
                self._advance(request, state, SwapState.COMMITTED)

            except Exception as e:
                if state == SwapState.QUOTE_OBTAINED:
                    ledger.restore(before)
                self._advance(request, state, SwapState.FAILED)
                logger.warning(f"Swap failed for {request.wallet_address}: {e}")
                self._record(
                    SwapRecord(
                        request=request,
                        status=SwapStatus.FAILED,
                        error_code=getattr(e, "code", type(e).__name__),
                        error_message=str(e),
                    )
                )
                raise

        logger.info(
            f"Swap completed for {request.wallet_address}: {request.amount} {request.from_token} -> "
            f"{result.received_amount} {request.to_token} via {result.source}"
        )
        self._record(SwapRecord(request=request, status=SwapStatus.COMPLETED, result=result))
        return result

    def history(self, wallet_address: str) -> list[SwapRecord]:
        """Swap attempts for a wallet, oldest first."""
        return list(self._history.get(wallet_address, []))

    def _record(self, record: SwapRecord) -> None:
        self._history.setdefault(record.request.wallet_address, []).append(record)

    def _advance(self, request: SwapRequest, current: SwapState, new: SwapState) -> SwapState:
        logger.debug(
            f"Swap {request.wallet_address} {request.from_token}->{request.to_token}: "
            f"{current.value} -> {new.value}"
        )
        return new
