"""User onboarding and balance endpoints."""

from fastapi import APIRouter, Depends

from swapchecker.ledger.onboarding import onboard_user
from swapchecker.ledger.users import IncorrectNetworkError, UserNotFoundError
from swapchecker.session import SwapSession
from swapchecker.web.contracts.swaps import SwapHistoryResponse, SwapRecordResponse
from swapchecker.web.contracts.users import OnboardRequest, UserResponse
from swapchecker.web.controllers.deps import get_session
from swapchecker.web.errors import to_http_exception


router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    request: OnboardRequest,
    session: SwapSession = Depends(get_session),
) -> UserResponse:
    """Onboard a wallet.

    Only the configured network is accepted. Balances are randomized
    when not given.
    """
    try:
        user = onboard_user(
            session.users,
            request.wallet_address,
            request.network,
            balances=request.balances,
            supported_network=session.settings.supported_network,
        )
    except (IncorrectNetworkError, ValueError) as e:
        raise to_http_exception(e)

    return UserResponse.from_user(user)


@router.get("/{wallet_address}", response_model=UserResponse)
async def get_user(
    wallet_address: str,
    session: SwapSession = Depends(get_session),
) -> UserResponse:
    """Get a user's balances."""
    try:
        user = session.users.require(wallet_address)
    except UserNotFoundError as e:
        raise to_http_exception(e)

    return UserResponse.from_user(user)


@router.get("/{wallet_address}/swaps", response_model=SwapHistoryResponse)
async def get_user_swaps(
    wallet_address: str,
    session: SwapSession = Depends(get_session),
) -> SwapHistoryResponse:
    """Get a user's swap attempts, oldest first."""
    if wallet_address not in session.users:
        raise to_http_exception(UserNotFoundError(wallet_address))

    records = session.executor.history(wallet_address)
    return SwapHistoryResponse(
        wallet_address=wallet_address,
        swaps=[SwapRecordResponse.from_record(r) for r in records],
    )
