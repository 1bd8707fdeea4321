"""Pytest configuration and fixtures."""

import os
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["SUPPORTED_NETWORK"] = "Ethereum"

from swapchecker.api.app import create_app
from swapchecker.assets import Network, Token
from swapchecker.ledger.balances import BalanceLedger
from swapchecker.ledger.users import User, UserStore
from swapchecker.routing.base import PairQuote, QuoteAggregator, QuoteBook, QuoteSource
from swapchecker.services.swap_executor import SwapExecutor
from swapchecker.session import SwapSession
from swapchecker.utils.locks import clear_wallet_locks

WALLET = "0xA11CE00000000000000000000000000000000001"


class CountingSource(QuoteSource):
    """Wraps a source and counts quote calls."""

    def __init__(self, inner: QuoteSource):
        self.inner = inner
        self.calls = 0

    @property
    def name(self) -> str:
        return self.inner.name

    @property
    def network(self) -> Network:
        return self.inner.network

    def pairs(self):
        return self.inner.pairs()

    def quote(self, from_token, to_token, amount):
        self.calls += 1
        return self.inner.quote(from_token, to_token, amount)


def make_book(name: str, *rows, network: Network = Network.ETHEREUM) -> QuoteBook:
    """Build a book from (from, to, rate, liquidity) rows."""
    return QuoteBook(
        name=name,
        network=network,
        quotes=[
            PairQuote(from_token=f, to_token=t, rate=Decimal(rate), liquidity=liquidity)
            for f, t, rate, liquidity in rows
        ],
    )


@pytest.fixture(autouse=True)
def reset_locks():
    """Clear wallet locks before each test."""
    clear_wallet_locks()


@pytest.fixture
def book_a() -> QuoteBook:
    return make_book("A", (Token.USDT, Token.USDC, "1.001", 50_000_000))


@pytest.fixture
def book_b() -> QuoteBook:
    return make_book("B", (Token.USDT, Token.USDC, "1.002", 48_000_000))


@pytest.fixture
def book_c() -> QuoteBook:
    """Best rate, tiny liquidity."""
    return make_book("C", (Token.USDT, Token.USDC, "1.01", 500))


@pytest.fixture
def sources(book_a, book_b, book_c) -> list[CountingSource]:
    return [CountingSource(book) for book in (book_c, book_a, book_b)]


@pytest.fixture
def aggregator(sources) -> QuoteAggregator:
    return QuoteAggregator(sources=list(sources), slippage=Decimal("0.005"))


@pytest.fixture
def user_store() -> UserStore:
    store = UserStore()
    store.put(
        User(
            wallet_address=WALLET,
            network=Network.ETHEREUM,
            ledger=BalanceLedger({Token.USDT: Decimal("5000"), Token.USDC: Decimal("100")}),
        )
    )
    return store


@pytest.fixture
def executor(user_store, aggregator) -> SwapExecutor:
    return SwapExecutor(user_store, aggregator, lock_timeout=1.0)


@pytest.fixture
def session() -> SwapSession:
    """Session over the simulated sources with no users."""
    return SwapSession()


@pytest_asyncio.fixture
async def client(session):
    """Create async test client."""
    app = create_app(session)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
