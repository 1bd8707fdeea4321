"""Token and network catalog.

Supported tokens (stablecoins only):
- USDC, USDT, BUSD

Supported networks:
- Ethereum, BNBChain, Polygon (only one is accepted for trading, see config)
"""

from enum import Enum


class Token(str, Enum):
    """Fungible tokens the swap engine understands."""

    USDC = "USDC"
    USDT = "USDT"
    BUSD = "BUSD"

    @classmethod
    def parse(cls, symbol: str) -> "Token":
        """Parse a token symbol case-insensitively.

        Raises:
            ValueError: If the symbol is not in the catalog
        """
        try:
            return cls(symbol.strip().upper())
        except ValueError:
            supported = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown token '{symbol}'. Supported: {supported}")

    def __str__(self) -> str:
        return self.value


class Network(str, Enum):
    """Networks a liquidity source or user can be bound to."""

    ETHEREUM = "Ethereum"
    BNB_CHAIN = "BNBChain"
    POLYGON = "Polygon"

    def __str__(self) -> str:
        return self.value
