"""Swap execution contracts."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from swapchecker.assets import Token
from swapchecker.services.swap_executor import SwapRecord, SwapStatus
from swapchecker.web.contracts.quotes import TokenSymbol


class SwapRequestBody(BaseModel):
    """Request to execute a swap for a user."""

    wallet_address: str = Field(..., min_length=1, description="Wallet address of the user")
    from_token: TokenSymbol = Field(..., description="Token to sell")
    to_token: TokenSymbol = Field(..., description="Token to buy")
    amount: Decimal = Field(..., gt=0, description="Amount of from_token to swap")


class SwapResponse(BaseModel):
    """Outcome of an executed swap."""

    success: bool = True
    source: str = Field(..., description="Source that filled the swap")
    from_token: Token
    to_token: Token
    amount: Decimal
    received_amount: Decimal
    slippage: Decimal
    balances: dict[Token, Decimal] = Field(
        default_factory=dict, description="User balances after the swap"
    )


class SwapRecordResponse(BaseModel):
    """One entry of a user's swap history."""

    status: SwapStatus
    from_token: Token
    to_token: Token
    amount: Decimal
    source: Optional[str] = None
    received_amount: Optional[Decimal] = None
    error_code: Optional[str] = None
    error: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: SwapRecord) -> "SwapRecordResponse":
        result = record.result
        return cls(
            status=record.status,
            from_token=record.request.from_token,
            to_token=record.request.to_token,
            amount=record.request.amount,
            source=result.source if result else None,
            received_amount=result.received_amount if result else None,
            error_code=record.error_code,
            error=record.error_message,
            created_at=datetime.fromtimestamp(record.created_at, tz=timezone.utc),
        )


class SwapHistoryResponse(BaseModel):
    """A user's swap attempts, oldest first."""

    wallet_address: str
    swaps: list[SwapRecordResponse] = Field(default_factory=list)
