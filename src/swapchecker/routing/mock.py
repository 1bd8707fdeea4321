"""Simulated liquidity sources.

Fixed rate/liquidity tables for the five sources the checker compares.
These are for demonstration purposes only and do not track any market.
"""

from decimal import Decimal

from swapchecker.assets import Network, Token
from swapchecker.routing.base import PairQuote, QuoteBook

# source name -> (network, [(from, to, rate, liquidity), ...])
SIMULATED_BOOKS: dict[str, tuple[Network, list[tuple[Token, Token, str, int]]]] = {
    "Uniswap": (
        Network.ETHEREUM,
        [
            (Token.USDT, Token.USDC, "1.001", 50_000_000),
            (Token.USDC, Token.USDT, "0.998", 45_000_000),
            (Token.USDC, Token.BUSD, "0.999", 12_000_000),
            (Token.BUSD, Token.USDC, "1.000", 10_000_000),
        ],
    ),
    "PancakeSwap": (
        Network.BNB_CHAIN,
        [
            (Token.USDT, Token.USDC, "1.002", 48_000_000),
            (Token.USDC, Token.USDT, "0.997", 40_000_000),
            (Token.USDT, Token.BUSD, "1.001", 30_000_000),
            (Token.BUSD, Token.USDT, "0.999", 30_000_000),
        ],
    ),
    "CowSwap": (
        Network.ETHEREUM,
        [
            (Token.USDT, Token.USDC, "1.010", 500),
            (Token.USDC, Token.USDT, "0.999", 20_000_000),
        ],
    ),
    "Matcha": (
        Network.POLYGON,
        [
            (Token.USDT, Token.USDC, "0.999", 60_000_000),
            (Token.USDC, Token.BUSD, "1.001", 8_000_000),
            (Token.BUSD, Token.USDC, "0.998", 8_000_000),
        ],
    ),
    "Sushi": (
        Network.ETHEREUM,
        [
            (Token.USDT, Token.USDC, "1.000", 25_000_000),
            (Token.USDC, Token.USDT, "0.998", 25_000_000),
            (Token.USDT, Token.BUSD, "0.998", 5_000_000),
        ],
    ),
}


def build_simulated_book(name: str) -> QuoteBook:
    """Build one simulated source by name.

    Raises:
        KeyError: If the name is not a simulated source
    """
    network, rows = SIMULATED_BOOKS[name]
    quotes = [
        PairQuote(
            from_token=from_token,
            to_token=to_token,
            rate=Decimal(rate),
            liquidity=liquidity,
        )
        for from_token, to_token, rate, liquidity in rows
    ]
    return QuoteBook(name=name, network=network, quotes=quotes)


def build_simulated_books() -> list[QuoteBook]:
    """Build every simulated source, in table order."""
    return [build_simulated_book(name) for name in SIMULATED_BOOKS]
