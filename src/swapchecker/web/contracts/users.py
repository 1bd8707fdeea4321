"""User onboarding and balance contracts."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from swapchecker.assets import Network, Token
from swapchecker.ledger.users import User


class OnboardRequest(BaseModel):
    """Request to create a user."""

    wallet_address: str = Field(..., min_length=1, description="Wallet address (identity key)")
    network: Network = Field(..., description="Network the wallet lives on")
    balances: Optional[dict[Token, Decimal]] = Field(
        None, description="Starting balances (randomized if omitted)"
    )

    @field_validator("balances")
    @classmethod
    def balances_non_negative(cls, value):
        if value is not None and any(amount < 0 for amount in value.values()):
            raise ValueError("Starting balances must be non-negative")
        return value


class UserResponse(BaseModel):
    """A user and their balances."""

    wallet_address: str
    network: Network
    balances: dict[Token, Decimal] = Field(default_factory=dict)

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            wallet_address=user.wallet_address,
            network=user.network,
            balances=user.balances,
        )
