"""Users and the in-memory user store."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from swapchecker.assets import Network, Token
from swapchecker.ledger.balances import BalanceLedger

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Wallet address is not present in the store."""

    code = "user_not_found"

    def __init__(self, wallet_address: str):
        self.wallet_address = wallet_address
        super().__init__(f"User {wallet_address} not found")


class IncorrectNetworkError(ValueError):
    """Network tag is not the one accepted network."""

    code = "incorrect_network"

    def __init__(self, network: Network, supported: Network):
        self.network = network
        self.supported = supported
        super().__init__(f"Network {network} is not supported, use {supported}")


@dataclass
class User:
    """A wallet holder with per-token balances."""

    wallet_address: str
    network: Network
    ledger: BalanceLedger = field(default_factory=BalanceLedger)

    @property
    def balances(self) -> dict[Token, Decimal]:
        return self.ledger.snapshot()


class UserStore:
    """Wallet address -> User."""

    def __init__(self):
        self._users: dict[str, User] = {}

    def get(self, wallet_address: str) -> Optional[User]:
        """Get the live user record, or None."""
        return self._users.get(wallet_address)

    def require(self, wallet_address: str) -> User:
        """Get the live user record.

        Raises:
            UserNotFoundError: If no user has this address
        """
        user = self._users.get(wallet_address)
        if user is None:
            raise UserNotFoundError(wallet_address)
        return user

    def put(self, user: User) -> None:
        """Insert a user, replacing any with the same address."""
        if user.wallet_address in self._users:
            logger.info(f"Replacing user {user.wallet_address}")
        self._users[user.wallet_address] = user

    def remove(self, wallet_address: str) -> None:
        """Remove a user; no-op if absent."""
        self._users.pop(wallet_address, None)

    def addresses(self) -> list[str]:
        return list(self._users)

    def __contains__(self, wallet_address: str) -> bool:
        return wallet_address in self._users

    def __len__(self) -> int:
        return len(self._users)
