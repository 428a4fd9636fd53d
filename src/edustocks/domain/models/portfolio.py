"""Portfolio and Holding domain models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from edustocks.domain.models.enums import TradeSide

ZERO = Decimal("0")


@dataclass
class Holding:
    """
    A user's position in one symbol.

    `quantity` and `average_price` are the source of truth. The remaining
    fields are a snapshot recomputed on every portfolio read.
    """

    symbol: str
    quantity: int
    average_price: Decimal
    current_price: Decimal = ZERO
    total_value: Decimal = ZERO
    profit: Decimal = ZERO
    profit_percent: Decimal = ZERO

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the shares still held."""
        return self.average_price * self.quantity

    def revalue(self, price: Decimal) -> None:
        """Recompute derived fields against a fresh market price."""
        self.current_price = price
        self.total_value = price * self.quantity
        cost_basis = self.cost_basis
        self.profit = self.total_value - cost_basis
        if cost_basis:
            self.profit_percent = self.profit / cost_basis * 100
        else:
            self.profit_percent = ZERO


@dataclass
class Portfolio:
    """
    Simulated brokerage account for one user.

    Holdings are keyed by symbol; a holding is dropped as soon as its
    quantity reaches zero.
    """

    user_id: str
    balance: Decimal
    holdings: dict[str, Holding] = field(default_factory=dict)
    total_value: Decimal = ZERO

    def get_holding(self, symbol: str) -> Optional[Holding]:
        return self.holdings.get(symbol)

    @property
    def holdings_value(self) -> Decimal:
        return sum((h.total_value for h in self.holdings.values()), ZERO)

    def recompute_total(self) -> None:
        self.total_value = self.balance + self.holdings_value


@dataclass
class TradeResult:
    """Confirmation of an executed buy or sell."""

    user_id: str
    side: TradeSide
    symbol: str
    quantity: int
    price: Decimal
    amount: Decimal
    portfolio: Portfolio

    @property
    def balance(self) -> Decimal:
        return self.portfolio.balance
