"""Tests for the routing module."""

from decimal import Decimal

import pytest

from conftest import make_book
from swapchecker.assets import Network, Token
from swapchecker.routing.base import (
    InsufficientLiquidityError,
    PairNotSupportedError,
    PairQuote,
    QuoteAggregator,
    QuoteBook,
    QuoteSource,
)
from swapchecker.routing.factory import create_default_aggregator, create_minimal_aggregator
from swapchecker.routing.mock import SIMULATED_BOOKS, build_simulated_books


class FixedSource(QuoteSource):
    """Source that answers every quote with a fixed value or error."""

    def __init__(self, name, outcome):
        self._name = name
        self.outcome = outcome

    @property
    def name(self):
        return self._name

    @property
    def network(self):
        return Network.ETHEREUM

    def pairs(self):
        return [(Token.USDT, Token.USDC)]

    def quote(self, from_token, to_token, amount):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class TestPairQuote:
    """Tests for PairQuote validation."""

    def test_rejects_same_token(self):
        with pytest.raises(ValueError, match="itself"):
            PairQuote(Token.USDC, Token.USDC, Decimal("1"), 10)

    def test_rejects_non_positive_rate(self):
        with pytest.raises(ValueError, match="Rate"):
            PairQuote(Token.USDT, Token.USDC, Decimal("0"), 10)

    def test_rejects_negative_liquidity(self):
        with pytest.raises(ValueError, match="Liquidity"):
            PairQuote(Token.USDT, Token.USDC, Decimal("1"), -1)

    def test_float_rate_is_coerced(self):
        pair_quote = PairQuote(Token.USDT, Token.USDC, 1.001, 10)

        assert pair_quote.rate == Decimal("1.001")

    def test_rejects_non_numeric_rate(self):
        with pytest.raises(ValueError):
            PairQuote(Token.USDT, Token.USDC, "abc", 10)


class TestQuoteBook:
    """Tests for a single quote book."""

    def test_quote_multiplies_rate(self, book_b):
        received = book_b.quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert received == Decimal("1002.0")

    def test_quote_is_directional(self, book_b):
        """USDT->USDC does not imply USDC->USDT."""
        with pytest.raises(PairNotSupportedError) as exc_info:
            book_b.quote(Token.USDC, Token.USDT, Decimal("1000"))

        assert exc_info.value.source == "B"
        assert exc_info.value.code == "pair_not_supported"

    def test_insufficient_liquidity(self, book_c):
        with pytest.raises(InsufficientLiquidityError) as exc_info:
            book_c.quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert exc_info.value.liquidity == 500

    def test_amount_equal_to_liquidity_is_allowed(self, book_c):
        received = book_c.quote(Token.USDT, Token.USDC, Decimal("500"))

        assert received == Decimal("505")

    def test_float_amount_is_accepted(self, book_b):
        received = book_b.quote(Token.USDT, Token.USDC, 1000.0)

        assert received == Decimal("1002.0")

    def test_quoting_does_not_deplete_liquidity(self, book_c):
        for _ in range(3):
            book_c.quote(Token.USDT, Token.USDC, Decimal("500"))

        assert book_c.quotes[0].liquidity == 500

    def test_duplicate_pair_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            make_book(
                "dup",
                (Token.USDT, Token.USDC, "1.0", 10),
                (Token.USDT, Token.USDC, "1.1", 10),
            )

    def test_pairs_and_network(self):
        book = make_book(
            "X",
            (Token.USDT, Token.USDC, "1.0", 10),
            (Token.USDC, Token.BUSD, "1.0", 10),
            network=Network.POLYGON,
        )

        assert book.pairs() == [(Token.USDT, Token.USDC), (Token.USDC, Token.BUSD)]
        assert book.supports_pair(Token.USDC, Token.BUSD)
        assert not book.supports_pair(Token.BUSD, Token.USDC)
        assert book.network == Network.POLYGON


class TestQuoteAggregator:
    """Tests for the quote aggregator."""

    def test_best_price_selection(self, book_a, book_b):
        aggregator = QuoteAggregator(sources=[book_a, book_b])

        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert best.source == "B"
        assert best.received_amount == Decimal("1002.0")
        assert best.from_token == Token.USDT
        assert best.to_token == Token.USDC

    def test_liquidity_exclusion(self, aggregator, sources):
        """C has the best rate but only 500 liquidity."""
        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert best.source == "B"
        # Every source was still consulted
        assert [s.calls for s in sources] == [1, 1, 1]

    def test_small_amount_goes_to_best_rate(self, aggregator):
        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("100"))

        assert best.source == "C"
        assert best.received_amount == Decimal("101")

    def test_unsupported_pair(self, aggregator):
        for amount in (Decimal("1"), Decimal("1000"), Decimal("1000000")):
            with pytest.raises(PairNotSupportedError):
                aggregator.best_quote(Token.BUSD, Token.USDT, amount)

    def test_liquidity_short_everywhere_reports_unsupported(self, aggregator):
        with pytest.raises(PairNotSupportedError):
            aggregator.best_quote(Token.USDT, Token.USDC, Decimal("60000000"))

    def test_no_sources(self):
        with pytest.raises(PairNotSupportedError):
            QuoteAggregator().best_quote(Token.USDT, Token.USDC, Decimal("1"))

    def test_float_rate_book(self):
        book = QuoteBook(
            "float",
            Network.ETHEREUM,
            [PairQuote(Token.USDT, Token.USDC, 1.001, 1_000_000)],
        )
        aggregator = QuoteAggregator(sources=[book])

        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert best.received_amount == Decimal("1001")

    def test_failing_source_does_not_abort_search(self, book_b):
        broken = FixedSource("broken", RuntimeError("connection reset"))
        aggregator = QuoteAggregator(sources=[broken, book_b])

        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

        assert best.source == "B"
        quotes = aggregator.all_quotes(Token.USDT, Token.USDC, Decimal("1000"))
        assert [q.source for q in quotes] == ["B"]

    def test_negative_quote_is_skipped(self):
        negative = FixedSource("negative", Decimal("-1"))
        aggregator = QuoteAggregator(sources=[negative])

        with pytest.raises(PairNotSupportedError):
            aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

    def test_float_quote_from_source(self):
        aggregator = QuoteAggregator(sources=[FixedSource("float", 1001.5)])

        best = aggregator.best_quote(Token.USDT, Token.USDC, 1000)

        assert best.received_amount == Decimal("1001.5")
        assert best.amount == Decimal("1000")

    def test_sources_list_is_copied(self, book_a, book_b):
        given = [book_a]
        aggregator = QuoteAggregator(sources=given)

        aggregator.add_source(book_b)

        assert given == [book_a]
        assert aggregator.sources == [book_a, book_b]

    def test_tie_break_first_source_wins(self):
        first = make_book("first", (Token.USDT, Token.USDC, "1.002", 1_000_000))
        second = make_book("second", (Token.USDT, Token.USDC, "1.002", 1_000_000))
        aggregator = QuoteAggregator(sources=[first, second])

        winners = {
            aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000")).source
            for _ in range(10)
        }

        assert winners == {"first"}

        reversed_aggregator = QuoteAggregator(sources=[second, first])
        best = reversed_aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))
        assert best.source == "second"

    def test_slippage_is_placeholder(self, aggregator):
        small = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1"))
        large = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("40000000"))

        assert small.slippage == Decimal("0.005")
        assert large.slippage == Decimal("0.005")

    def test_all_quotes_in_source_order(self, aggregator):
        quotes = aggregator.all_quotes(Token.USDT, Token.USDC, Decimal("1000"))

        assert [q.source for q in quotes] == ["A", "B"]

    def test_supported_pairs_union(self):
        one = make_book("one", (Token.USDT, Token.USDC, "1", 1))
        two = make_book(
            "two",
            (Token.USDT, Token.USDC, "1", 1),
            (Token.USDC, Token.BUSD, "1", 1),
        )
        aggregator = QuoteAggregator(sources=[one, two])

        assert aggregator.supported_pairs() == [
            (Token.USDT, Token.USDC),
            (Token.USDC, Token.BUSD),
        ]

    def test_effective_rate_and_dict(self, book_b):
        best = QuoteAggregator(sources=[book_b]).best_quote(
            Token.USDT, Token.USDC, Decimal("1000")
        )

        assert best.effective_rate == Decimal("1.002")
        data = best.to_dict()
        assert data["source"] == "B"
        assert data["from_token"] == "USDT"
        assert Decimal(data["received_amount"]) == Decimal("1002")


class TestSimulatedSources:
    """Tests for the simulated sources and factories."""

    def test_all_books_built(self):
        books = build_simulated_books()

        assert [b.name for b in books] == list(SIMULATED_BOOKS)
        assert all(isinstance(b, QuoteBook) for b in books)

    def test_default_aggregator_best_usdt_usdc(self):
        aggregator = create_default_aggregator()

        best = aggregator.best_quote(Token.USDT, Token.USDC, Decimal("1000"))

        # CowSwap quotes 1.010 but only has 500 liquidity
        assert best.source == "PancakeSwap"
        assert best.received_amount == Decimal("1002.0")

    def test_minimal_aggregator(self):
        aggregator = create_minimal_aggregator(["Sushi"])

        assert [s.name for s in aggregator.sources] == ["Sushi"]
        assert aggregator.slippage == Decimal("0.005")

    def test_unknown_simulated_source(self):
        with pytest.raises(KeyError):
            create_minimal_aggregator(["Nowhere"])
