"""Per-user token balances."""

import logging
from decimal import Decimal
from typing import Optional

from swapchecker.assets import Token
from swapchecker.utils.money import to_decimal

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base class for ledger failures."""

    code = "ledger_error"


class InsufficientBalanceError(LedgerError):
    """Balance of the token is below the requested amount."""

    code = "insufficient_balance"

    def __init__(self, token: Token, available: Decimal, requested: Decimal):
        self.token = token
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient balance for {token}: available {available}, requested {requested}"
        )


class BalanceNotFoundError(LedgerError):
    """No balance entry exists for a token being debited."""

    code = "balance_not_found"

    def __init__(self, token: Token):
        self.token = token
        super().__init__(f"No balance found for {token}")


class BalanceLedger:
    """Token -> balance mapping for one user.

    Tokens that were never credited have no entry and read as zero.
    """

    def __init__(self, balances: Optional[dict[Token, Decimal]] = None):
        self._balances: dict[Token, Decimal] = {}
        for token, amount in (balances or {}).items():
            self.credit(token, amount)

    def balance_of(self, token: Token) -> Decimal:
        """Get balance, zero if absent."""
        return self._balances.get(token, Decimal("0"))

    def has_sufficient_balance(self, token: Token, amount: Decimal) -> bool:
        return self.balance_of(token) >= to_decimal(amount)

    def debit(self, token: Token, amount: Decimal) -> Decimal:
        """Reduce a balance.

        Returns:
            The new balance

        Raises:
            InsufficientBalanceError: If the balance is below amount
            BalanceNotFoundError: If there is no entry to debit
        """
        amount = _check_amount(amount)
        if not self.has_sufficient_balance(token, amount):
            raise InsufficientBalanceError(token, self.balance_of(token), amount)

        current = self._balances.get(token)
        if current is None:
            raise BalanceNotFoundError(token)

        self._balances[token] = current - amount
        return self._balances[token]

    def credit(self, token: Token, amount: Decimal) -> Decimal:
        """Increase a balance, creating the entry if absent.

        Returns:
            The new balance
        """
        amount = _check_amount(amount)
        self._balances[token] = self._balances.get(token, Decimal("0")) + amount
        return self._balances[token]

    def snapshot(self) -> dict[Token, Decimal]:
        """Copy of the current balances."""
        return dict(self._balances)

    def restore(self, snapshot: dict[Token, Decimal]) -> None:
        """Replace every balance with a previous snapshot."""
        self._balances = dict(snapshot)
        logger.debug(f"Ledger restored to {self!r}")

    def __contains__(self, token: Token) -> bool:
        return token in self._balances

    def __repr__(self) -> str:
        entries = ", ".join(f"{t.value}={a}" for t, a in self._balances.items())
        return f"BalanceLedger({entries})"


def _check_amount(amount) -> Decimal:
    amount = to_decimal(amount)
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")
    return amount
