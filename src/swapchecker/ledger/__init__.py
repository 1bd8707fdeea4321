"""Ledger module for users and their token balances."""

from swapchecker.ledger.balances import (
    BalanceLedger,
    BalanceNotFoundError,
    InsufficientBalanceError,
    LedgerError,
)
from swapchecker.ledger.onboarding import onboard_user, random_starting_balances
from swapchecker.ledger.users import (
    IncorrectNetworkError,
    User,
    UserNotFoundError,
    UserStore,
)

__all__ = [
    # Models
    "User",
    "UserStore",
    "BalanceLedger",
    # Errors
    "LedgerError",
    "InsufficientBalanceError",
    "BalanceNotFoundError",
    "UserNotFoundError",
    "IncorrectNetworkError",
    # Onboarding
    "onboard_user",
    "random_starting_balances",
]
