"""Quote sources and best-quote aggregation."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from swapchecker.assets import Network, Token
from swapchecker.utils.money import to_decimal

logger = logging.getLogger(__name__)

# Reported with every swap; not derived from quote data.
DEFAULT_SLIPPAGE = Decimal("0.005")


class QuoteError(Exception):
    """Base class for quoting failures."""

    code = "quote_error"


class PairNotSupportedError(QuoteError):
    """No source lists the directed pair (or none could satisfy it)."""

    code = "pair_not_supported"

    def __init__(self, from_token: Token, to_token: Token, source: Optional[str] = None):
        self.from_token = from_token
        self.to_token = to_token
        self.source = source
        where = f" on {source}" if source else ""
        super().__init__(f"Pair {from_token}->{to_token} is not supported{where}")


class InsufficientLiquidityError(QuoteError):
    """The pair exists but the amount exceeds the source's liquidity ceiling."""

    code = "insufficient_liquidity"

    def __init__(self, source: str, amount: Decimal, liquidity: int):
        self.source = source
        self.amount = amount
        self.liquidity = liquidity
        super().__init__(
            f"{source} liquidity {liquidity} is below requested amount {amount}"
        )


@dataclass(frozen=True)
class PairQuote:
    """A directed exchange offer within one liquidity source."""

    from_token: Token
    to_token: Token
    rate: Decimal
    liquidity: int

    def __post_init__(self):
        object.__setattr__(self, "rate", to_decimal(self.rate))
        if self.from_token == self.to_token:
            raise ValueError(f"Pair quote cannot swap {self.from_token} for itself")
        if self.rate <= 0:
            raise ValueError(f"Rate must be positive, got {self.rate}")
        if self.liquidity < 0:
            raise ValueError(f"Liquidity must be non-negative, got {self.liquidity}")

    @property
    def pair(self) -> tuple[Token, Token]:
        return (self.from_token, self.to_token)


@dataclass(frozen=True)
class SwapResult:
    """The winning quote for a swap."""

    source: str
    from_token: Token
    to_token: Token
    amount: Decimal
    received_amount: Decimal
    slippage: Decimal

    @property
    def effective_rate(self) -> Decimal:
        """Get effective exchange rate."""
        if self.amount == 0:
            return Decimal("0")
        return self.received_amount / self.amount

    def to_dict(self) -> dict:
        """Convert to dictionary for presentation."""
        return {
            "source": self.source,
            "from_token": self.from_token.value,
            "to_token": self.to_token.value,
            "amount": str(self.amount),
            "received_amount": str(self.received_amount),
            "slippage": str(self.slippage),
        }


class QuoteSource(ABC):
    """Anything that can quote a directed pair."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name identifier."""
        pass

    @property
    @abstractmethod
    def network(self) -> Network:
        """Network the source operates on."""
        pass

    @abstractmethod
    def quote(self, from_token: Token, to_token: Token, amount: Decimal) -> Decimal:
        """
        Quote a swap.

        Args:
            from_token: Token being sold
            to_token: Token being bought
            amount: Amount of from_token to swap

        Returns:
            Received amount of to_token

        Raises:
            PairNotSupportedError: If the source does not list the pair
            InsufficientLiquidityError: If the amount exceeds the liquidity ceiling
        """
        pass

    @abstractmethod
    def pairs(self) -> list[tuple[Token, Token]]:
        """Directed pairs this source can quote."""
        pass

    def supports_pair(self, from_token: Token, to_token: Token) -> bool:
        """Check if this source lists the pair."""
        return (from_token, to_token) in self.pairs()


class QuoteBook(QuoteSource):
    """A liquidity source backed by a fixed table of pair quotes.

    Liquidity is a capacity ceiling and is never depleted by quoting.
    """

    def __init__(self, name: str, network: Network, quotes: Iterable[PairQuote]):
        self._name = name
        self._network = network
        self._quotes: dict[tuple[Token, Token], PairQuote] = {}

        for pair_quote in quotes:
            if pair_quote.pair in self._quotes:
                raise ValueError(
                    f"Duplicate quote for {pair_quote.from_token}->{pair_quote.to_token} "
                    f"in book {name}"
                )
            self._quotes[pair_quote.pair] = pair_quote

    @property
    def name(self) -> str:
        return self._name

    @property
    def network(self) -> Network:
        return self._network

    @property
    def quotes(self) -> list[PairQuote]:
        return list(self._quotes.values())

    def pairs(self) -> list[tuple[Token, Token]]:
        return list(self._quotes)

    def supports_pair(self, from_token: Token, to_token: Token) -> bool:
        return (from_token, to_token) in self._quotes

    def quote(self, from_token: Token, to_token: Token, amount: Decimal) -> Decimal:
        pair_quote = self._quotes.get((from_token, to_token))
        if pair_quote is None:
            raise PairNotSupportedError(from_token, to_token, source=self._name)

        amount = to_decimal(amount)
        if pair_quote.liquidity < amount:
            raise InsufficientLiquidityError(self._name, amount, pair_quote.liquidity)

        return amount * pair_quote.rate

    def __repr__(self) -> str:
        return f"QuoteBook(name={self._name!r}, network={self._network.value}, pairs={len(self._quotes)})"


class QuoteAggregator:
    """Consults every quote source to find the best admissible quote.

    Sources are consulted in the order given. A later source replaces the
    current best only when it offers strictly more, so ties go to the
    first-encountered source.
    """

    def __init__(
        self,
        sources: Optional[list[QuoteSource]] = None,
        slippage: Decimal = DEFAULT_SLIPPAGE,
    ):
        self.sources: list[QuoteSource] = list(sources or [])
        self.slippage = slippage

    def add_source(self, source: QuoteSource) -> None:
        """Add a quote source."""
        self.sources.append(source)

    def best_quote(self, from_token: Token, to_token: Token, amount: Decimal) -> SwapResult:
        """
        Get the best quote across all sources.

        Raises:
            PairNotSupportedError: If no source can satisfy the request, whether
                because none lists the pair or none has enough liquidity
        """
        amount = to_decimal(amount)
        logger.info(f"Finding best quote: {amount} {from_token} -> {to_token}")

        best: Optional[SwapResult] = None
        for source in self.sources:
            received = self._try_quote(source, from_token, to_token, amount)
            if received is None:
                continue
            if best is None or received > best.received_amount:
                best = self._make_result(source, from_token, to_token, amount, received)

        if best is None:
            logger.warning(f"No quotes found for {amount} {from_token} -> {to_token}")
            raise PairNotSupportedError(from_token, to_token)

        logger.info(
            f"Selected best quote: {best.source} - {best.received_amount} {to_token} "
            f"(effective rate: {best.effective_rate:.6f})"
        )
        return best

    def all_quotes(self, from_token: Token, to_token: Token, amount: Decimal) -> list[SwapResult]:
        """Get every successful quote, in source order."""
        amount = to_decimal(amount)
        results = []
        for source in self.sources:
            received = self._try_quote(source, from_token, to_token, amount)
            if received is not None:
                results.append(self._make_result(source, from_token, to_token, amount, received))

        logger.debug(f"Got {len(results)} quote(s) for {from_token}->{to_token}")
        return results

    def supported_pairs(self) -> list[tuple[Token, Token]]:
        """Union of pairs listed by any source, in first-seen order."""
        seen: dict[tuple[Token, Token], None] = {}
        for source in self.sources:
            for pair in source.pairs():
                seen.setdefault(pair, None)
        return list(seen)

    def _try_quote(
        self, source: QuoteSource, from_token: Token, to_token: Token, amount: Decimal
    ) -> Optional[Decimal]:
        """Quote one source, absorbing its failure."""
        try:
            received = to_decimal(source.quote(from_token, to_token, amount))
        except QuoteError as e:
            logger.debug(f"{source.name} skipped for {from_token}->{to_token}: {e}")
            return None
        except Exception as e:
            logger.warning(f"{source.name} quote failed: {type(e).__name__}: {e}")
            return None

        if received < 0:
            logger.warning(f"{source.name} returned negative amount {received}, skipped")
            return None

        logger.debug(f"Quote from {source.name}: {amount} {from_token} -> {received} {to_token}")
        return received

    def _make_result(
        self,
        source: QuoteSource,
        from_token: Token,
        to_token: Token,
        amount: Decimal,
        received: Decimal,
    ) -> SwapResult:
        return SwapResult(
            source=source.name,
            from_token=from_token,
            to_token=to_token,
            amount=amount,
            received_amount=received,
            slippage=self.slippage,
        )
