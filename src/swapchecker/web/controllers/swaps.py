"""Swap execution endpoint."""

from fastapi import APIRouter, Depends

from swapchecker.services.swap_executor import SwapRequest
from swapchecker.session import SwapSession
from swapchecker.web.contracts.swaps import SwapRequestBody, SwapResponse
from swapchecker.web.controllers.deps import get_session
from swapchecker.web.errors import HANDLED_ERRORS, to_http_exception


router = APIRouter(prefix="/swaps", tags=["swaps"])


@router.post("", response_model=SwapResponse)
def execute_swap(
    body: SwapRequestBody,
    session: SwapSession = Depends(get_session),
) -> SwapResponse:
    """Swap at the best available source and update the user's balances.

    On any failure the balances are left untouched. Runs in the threadpool
    because the executor blocks on the wallet lock.
    """
    request = SwapRequest(
        wallet_address=body.wallet_address,
        from_token=body.from_token,
        to_token=body.to_token,
        amount=body.amount,
    )

    try:
        result = session.executor.execute(request)
    except HANDLED_ERRORS as e:
        raise to_http_exception(e)

    user = session.users.require(body.wallet_address)
    return SwapResponse(
        source=result.source,
        from_token=result.from_token,
        to_token=result.to_token,
        amount=result.amount,
        received_amount=result.received_amount,
        slippage=result.slippage,
        balances=user.balances,
    )
