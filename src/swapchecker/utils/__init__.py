"""Utility modules for swapchecker."""

from swapchecker.utils.locks import LockTimeoutError, WalletLock, get_wallet_lock, wallet_lock

__all__ = ["LockTimeoutError", "WalletLock", "get_wallet_lock", "wallet_lock"]
