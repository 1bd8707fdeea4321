"""Concurrency control utilities for wallet balance operations.

Provides per-wallet locking so the balance precheck and the debit of a swap
cannot interleave with another swap on the same wallet.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)

# Global lock registry: wallet_address -> threading.Lock
_wallet_locks: dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


class LockTimeoutError(Exception):
    """Raised when a lock cannot be acquired within the timeout period."""

    code = "lock_timeout"


def get_wallet_lock(wallet_address: str) -> threading.Lock:
    """Get or create the lock for a wallet."""
    with _registry_lock:
        if wallet_address not in _wallet_locks:
            _wallet_locks[wallet_address] = threading.Lock()
        return _wallet_locks[wallet_address]


class WalletLock:
    """Context manager for exclusive access to a wallet's balances.

    Example:
        with WalletLock(address, operation="swap"):
            if ledger.has_sufficient_balance(token, amount):
                ledger.debit(token, amount)
    """

    def __init__(
        self,
        wallet_address: str,
        timeout: Optional[float] = 30.0,
        operation: str = "balance_operation",
    ):
        """Initialize the lock.

        Args:
            wallet_address: Wallet to lock
            timeout: Maximum time to wait for lock (None = wait forever)
            operation: Description of the operation for logging
        """
        self.wallet_address = wallet_address
        self.timeout = timeout
        self.operation = operation
        self._lock: Optional[threading.Lock] = None
        self._acquired = False

    def __enter__(self) -> "WalletLock":
        self._lock = get_wallet_lock(self.wallet_address)

        if self.timeout:
            self._acquired = self._lock.acquire(timeout=self.timeout)
        else:
            self._acquired = self._lock.acquire()

        if not self._acquired:
            logger.warning(
                f"Lock timeout for wallet {self.wallet_address} after {self.timeout}s: {self.operation}"
            )
            raise LockTimeoutError(
                f"Could not acquire lock for wallet {self.wallet_address} within {self.timeout}s"
            )

        logger.debug(f"Lock acquired for wallet {self.wallet_address}: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._acquired and self._lock:
            self._lock.release()
            self._acquired = False
            logger.debug(f"Lock released for wallet {self.wallet_address}: {self.operation}")
        return False


@contextmanager
def wallet_lock(
    wallet_address: str,
    timeout: Optional[float] = 30.0,
    operation: str = "balance_operation",
):
    """Functional form of WalletLock.

    Example:
        with wallet_lock(address, operation="swap"):
            ...
    """
    with WalletLock(wallet_address, timeout=timeout, operation=operation):
        yield


def clear_wallet_locks() -> None:
    """Clear all wallet locks (useful for testing)."""
    with _registry_lock:
        _wallet_locks.clear()


def wallet_lock_count() -> int:
    """Number of wallets with a registered lock."""
    with _registry_lock:
        return len(_wallet_locks)
