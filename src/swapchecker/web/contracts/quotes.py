"""Quote request and response contracts."""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from swapchecker.assets import Token
from swapchecker.routing.base import SwapResult


def parse_token(value):
    """Accept token symbols in any case."""
    if isinstance(value, str):
        return Token.parse(value)
    return value


# Token accepted as a case-insensitive symbol
TokenSymbol = Annotated[Token, BeforeValidator(parse_token)]


class QuoteRequest(BaseModel):
    """Request for a swap quote."""

    from_token: TokenSymbol = Field(..., description="Token to sell (e.g., USDT)")
    to_token: TokenSymbol = Field(..., description="Token to buy (e.g., USDC)")
    amount: Decimal = Field(..., gt=0, description="Amount of from_token to swap")

    @model_validator(mode="after")
    def check_distinct_tokens(self) -> "QuoteRequest":
        if self.from_token == self.to_token:
            raise ValueError(f"Cannot quote {self.from_token} for itself")
        return self


class QuoteResponse(BaseModel):
    """A single source's quote."""

    source: str = Field(..., description="Liquidity source name")
    from_token: Token
    to_token: Token
    amount: Decimal = Field(..., description="Input amount")
    received_amount: Decimal = Field(..., description="Output amount")
    rate: Decimal = Field(..., description="Effective exchange rate")
    slippage: Decimal = Field(..., description="Placeholder slippage estimate")

    @classmethod
    def from_result(cls, result: SwapResult) -> "QuoteResponse":
        return cls(
            source=result.source,
            from_token=result.from_token,
            to_token=result.to_token,
            amount=result.amount,
            received_amount=result.received_amount,
            rate=result.effective_rate,
            slippage=result.slippage,
        )


class MultiQuoteResponse(BaseModel):
    """Quotes from every source that could satisfy the request."""

    from_token: Token
    to_token: Token
    amount: Decimal
    quotes: list[QuoteResponse] = Field(default_factory=list)
    best_quote: Optional[QuoteResponse] = None


class TradingPair(BaseModel):
    """A directed pair some source can quote."""

    from_token: Token
    to_token: Token


class PairsResponse(BaseModel):
    """Every directed pair any source can quote."""

    pairs: list[TradingPair] = Field(default_factory=list)
    total: int = 0
