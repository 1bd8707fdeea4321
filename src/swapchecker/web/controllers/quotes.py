"""Quote API endpoints.

Quotes are READ-ONLY: no balance is touched.
"""

from fastapi import APIRouter, Depends

from swapchecker.routing.base import PairNotSupportedError
from swapchecker.session import SwapSession
from swapchecker.web.contracts.quotes import (
    MultiQuoteResponse,
    PairsResponse,
    QuoteRequest,
    QuoteResponse,
    TradingPair,
)
from swapchecker.web.controllers.deps import get_session
from swapchecker.web.errors import to_http_exception


router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("", response_model=QuoteResponse)
async def get_quote(
    request: QuoteRequest,
    session: SwapSession = Depends(get_session),
) -> QuoteResponse:
    """Get the best quote across all sources."""
    try:
        result = session.aggregator.best_quote(
            request.from_token, request.to_token, request.amount
        )
    except PairNotSupportedError as e:
        raise to_http_exception(e)

    return QuoteResponse.from_result(result)


@router.post("/multi", response_model=MultiQuoteResponse)
async def get_multi_quote(
    request: QuoteRequest,
    session: SwapSession = Depends(get_session),
) -> MultiQuoteResponse:
    """Get quotes from every source that can fill the request, in source order."""
    results = session.aggregator.all_quotes(
        request.from_token, request.to_token, request.amount
    )
    quotes = [QuoteResponse.from_result(r) for r in results]

    best = None
    for quote in quotes:
        if best is None or quote.received_amount > best.received_amount:
            best = quote

    return MultiQuoteResponse(
        from_token=request.from_token,
        to_token=request.to_token,
        amount=request.amount,
        quotes=quotes,
        best_quote=best,
    )


@router.get("/pairs", response_model=PairsResponse)
async def get_supported_pairs(session: SwapSession = Depends(get_session)) -> PairsResponse:
    """Get every directed pair at least one source lists."""
    pairs = [
        TradingPair(from_token=from_token, to_token=to_token)
        for from_token, to_token in session.aggregator.supported_pairs()
    ]
    return PairsResponse(pairs=pairs, total=len(pairs))
