"""User onboarding: network check and starting balances."""

import logging
import random
from decimal import Decimal
from typing import Optional

from swapchecker.assets import Network, Token
from swapchecker.config import get_settings
from swapchecker.ledger.balances import BalanceLedger
from swapchecker.ledger.users import IncorrectNetworkError, User, UserStore

logger = logging.getLogger(__name__)


def random_starting_balances(
    rng: Optional[random.Random] = None,
    low: Optional[int] = None,
    high: Optional[int] = None,
) -> dict[Token, Decimal]:
    """Generate a whole-unit starting balance for every catalog token.

    Args:
        rng: Random source (module-level random if not provided)
        low: Lowest balance (settings default if not provided)
        high: Highest balance (settings default if not provided)
    """
    settings = get_settings()
    rng = rng or random.Random()
    low = settings.starting_balance_min if low is None else low
    high = settings.starting_balance_max if high is None else high

    if low > high:
        raise ValueError(f"Invalid starting balance range {low}..{high}")

    return {token: Decimal(rng.randint(low, high)) for token in Token}


def onboard_user(
    store: UserStore,
    wallet_address: str,
    network: Network,
    balances: Optional[dict[Token, Decimal]] = None,
    rng: Optional[random.Random] = None,
    supported_network: Optional[Network] = None,
) -> User:
    """Create a user and add it to the store.

    Args:
        store: Store to add the user to
        wallet_address: Identity key of the user
        network: Network the user is bound to
        balances: Starting balances (randomized if not provided)
        rng: Random source for randomized balances
        supported_network: Accepted network (settings default if not provided)

    Returns:
        The stored user

    Raises:
        IncorrectNetworkError: If network is not the supported one
        ValueError: If the wallet address is empty
    """
    supported_network = supported_network or get_settings().supported_network

    if network != supported_network:
        logger.warning(f"Rejected onboarding of {wallet_address} on {network}")
        raise IncorrectNetworkError(network, supported_network)

    wallet_address = wallet_address.strip()
    if not wallet_address:
        raise ValueError("Wallet address is required")

    if balances is None:
        balances = random_starting_balances(rng)

    user = User(
        wallet_address=wallet_address,
        network=network,
        ledger=BalanceLedger(balances),
    )
    store.put(user)

    logger.info(f"Onboarded {wallet_address} on {network} with {len(balances)} balance(s)")
    return user
