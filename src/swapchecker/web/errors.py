"""Mapping of domain failures to HTTP errors."""

from fastapi import HTTPException

from swapchecker.ledger.balances import LedgerError
from swapchecker.ledger.users import IncorrectNetworkError, UserNotFoundError
from swapchecker.routing.base import PairNotSupportedError, QuoteError
from swapchecker.services.swap_executor import InvalidSwapRequestError
from swapchecker.utils.locks import LockTimeoutError

# Checked in order, first match wins
STATUS_CODES: list[tuple[type, int]] = [
    (UserNotFoundError, 404),
    (PairNotSupportedError, 404),
    (InvalidSwapRequestError, 422),
    (IncorrectNetworkError, 400),
    (LedgerError, 400),
    (QuoteError, 400),
    (LockTimeoutError, 409),
    (ValueError, 400),
]

HANDLED_ERRORS = tuple(exc_type for exc_type, _ in STATUS_CODES)


def to_http_exception(error: Exception) -> HTTPException:
    """Build the HTTP error for a domain failure."""
    status_code = next(
        (code for exc_type, code in STATUS_CODES if isinstance(error, exc_type)),
        500,
    )
    return HTTPException(
        status_code=status_code,
        detail={
            "code": getattr(error, "code", "internal_error"),
            "message": str(error),
        },
    )
