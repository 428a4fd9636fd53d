"""Portfolio ledger: simulated cash and average-cost holdings per user."""

import logging
from decimal import Decimal
from typing import Optional

from edustocks.core.exceptions import (
    InsufficientBalanceError,
    InsufficientSharesError,
    InvalidQuantityError,
    StockNotFoundError,
    UnauthenticatedError,
)
from edustocks.core.locks import KeyedLock
from edustocks.domain.models import Holding, Portfolio, TradeResult, TradeSide
from edustocks.domain.views import FallbackQuote, Quote, QuoteFailure
from edustocks.repositories.protocols import RecordStore
from edustocks.services.quote_cache import QuoteCache, normalize_symbol

logger = logging.getLogger(__name__)

DEFAULT_STARTING_BALANCE = Decimal("10000.0")


class PortfolioLedger:
    """
    Service owning every user's balance and holdings.

    Each operation is a read-modify-write of the user's whole portfolio
    record, run under that user's lock so concurrent trades for one user
    cannot lose an update. Failed preconditions raise before anything is
    mutated or persisted.
    """

    def __init__(
        self,
        store: RecordStore[Portfolio],
        quote_cache: QuoteCache,
        starting_balance: Decimal = DEFAULT_STARTING_BALANCE,
        locks: Optional[KeyedLock] = None,
    ):
        self._store = store
        self._quote_cache = quote_cache
        self._starting_balance = Decimal(str(starting_balance))
        self._locks = locks or KeyedLock()

    def get_portfolio(self, user_id: str) -> Portfolio:
        """
        Return the user's portfolio, valued at current prices.

        Creates and persists a fresh portfolio on first access.
        """
        user_id = self._require_user(user_id)
        with self._locks.hold(user_id):
            portfolio = self._load_or_create(user_id)
            self._revalue(portfolio)
            return portfolio

    def buy(self, user_id: str, symbol: str, quantity: int) -> TradeResult:
        """
        Buy `quantity` shares of `symbol` at the current quote.

        Raises:
            InvalidQuantityError: quantity is not a positive whole number
            StockNotFoundError: no tradable quote for the symbol
            InsufficientBalanceError: cost exceeds available cash
        """
        user_id = self._require_user(user_id)
        quantity = self._validate_quantity(quantity)
        key = normalize_symbol(symbol)

        with self._locks.hold(user_id):
            portfolio = self._load_or_create(user_id)
            quote = self._tradable_quote(key or symbol)

            cost = quote.price * quantity
            if cost > portfolio.balance:
                raise InsufficientBalanceError(str(cost), str(portfolio.balance))

            holding = portfolio.get_holding(key)
            if holding is not None:
                new_quantity = holding.quantity + quantity
                # Weighted by total cost so buys at different prices average correctly
                holding.average_price = (holding.average_price * holding.quantity + cost) / new_quantity
                holding.quantity = new_quantity
            else:
                holding = Holding(symbol=key, quantity=quantity, average_price=quote.price)
                portfolio.holdings[key] = holding
            holding.revalue(quote.price)

            portfolio.balance -= cost
            self._revalue(portfolio)
            self._store.put(user_id, portfolio)

        logger.info("User %s bought %d %s at %s", user_id, quantity, key, quote.price)
        return TradeResult(
            user_id=user_id,
            side=TradeSide.BUY,
            symbol=key,
            quantity=quantity,
            price=quote.price,
            amount=cost,
            portfolio=portfolio,
        )

    def sell(self, user_id: str, symbol: str, quantity: int) -> TradeResult:
        """
        Sell `quantity` shares of `symbol` at the current quote.

        The holding's average price is unchanged by a sell; a fully sold
        holding is removed.

        Raises:
            InvalidQuantityError: quantity is not a positive whole number
            InsufficientSharesError: no holding, or fewer shares than requested
            StockNotFoundError: no tradable quote for the symbol
        """
        user_id = self._require_user(user_id)
        quantity = self._validate_quantity(quantity)
        key = normalize_symbol(symbol)

        with self._locks.hold(user_id):
            portfolio = self._load_or_create(user_id)

            holding = portfolio.get_holding(key)
            available = holding.quantity if holding else 0
            if holding is None or holding.quantity < quantity:
                raise InsufficientSharesError(key or symbol, str(quantity), str(available))

            quote = self._tradable_quote(key)
            proceeds = quote.price * quantity
            portfolio.balance += proceeds

            if holding.quantity == quantity:
                del portfolio.holdings[key]
            else:
                holding.quantity -= quantity
                holding.revalue(quote.price)

            self._revalue(portfolio)
            self._store.put(user_id, portfolio)

        logger.info("User %s sold %d %s at %s", user_id, quantity, key, quote.price)
        return TradeResult(
            user_id=user_id,
            side=TradeSide.SELL,
            symbol=key,
            quantity=quantity,
            price=quote.price,
            amount=proceeds,
            portfolio=portfolio,
        )

    def _load_or_create(self, user_id: str) -> Portfolio:
        portfolio = self._store.get(user_id)
        if portfolio is None:
            portfolio = Portfolio(
                user_id=user_id,
                balance=self._starting_balance,
                total_value=self._starting_balance,
            )
            self._store.put(user_id, portfolio)
            logger.info("Created portfolio for user %s", user_id)
        return portfolio

    def _tradable_quote(self, symbol: str) -> Quote:
        result = self._quote_cache.lookup(symbol)
        if isinstance(result, QuoteFailure):
            raise StockNotFoundError(result.symbol or symbol, result.message)
        if not result.quote.is_tradable:
            raise StockNotFoundError(result.quote.symbol, "no tradable price")
        if isinstance(result, FallbackQuote):
            logger.info("Pricing %s with fallback quote (%s)", symbol, result.reason.value)
        return result.quote

    def _revalue(self, portfolio: Portfolio) -> None:
        """Refresh derived holding fields; a holding without a quote keeps its last snapshot."""
        for holding in portfolio.holdings.values():
            result = self._quote_cache.lookup(holding.symbol)
            if isinstance(result, QuoteFailure) or not result.quote.is_tradable:
                logger.warning("Could not revalue %s for user %s", holding.symbol, portfolio.user_id)
                continue
            holding.revalue(result.quote.price)
        portfolio.recompute_total()

    @staticmethod
    def _require_user(user_id: Optional[str]) -> str:
        if not user_id or not user_id.strip():
            raise UnauthenticatedError()
        return user_id

    @staticmethod
    def _validate_quantity(quantity: object) -> int:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(quantity)
        return quantity
