"""Pydantic schemas for portfolio and trading API."""

from pydantic import BaseModel, Field

from edustocks.domain.models import Holding, Portfolio, TradeResult, TradeSide


class HoldingResponse(BaseModel):
    """One position with values computed at the latest price."""

    symbol: str
    quantity: int
    average_price: float
    current_price: float
    total_value: float
    profit: float
    profit_percent: float

    @classmethod
    def from_holding(cls, holding: Holding) -> "HoldingResponse":
        return cls(
            symbol=holding.symbol,
            quantity=holding.quantity,
            average_price=float(holding.average_price),
            current_price=float(holding.current_price),
            total_value=float(holding.total_value),
            profit=float(holding.profit),
            profit_percent=float(holding.profit_percent),
        )


class PortfolioResponse(BaseModel):
    """Cash balance, holdings and total account value."""

    user_id: str
    balance: float
    holdings: list[HoldingResponse]
    total_value: float

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio) -> "PortfolioResponse":
        return cls(
            user_id=portfolio.user_id,
            balance=float(portfolio.balance),
            holdings=[
                HoldingResponse.from_holding(portfolio.holdings[symbol])
                for symbol in sorted(portfolio.holdings)
            ],
            total_value=float(portfolio.total_value),
        )


class TradeRequest(BaseModel):
    """Request body for buy and sell."""

    symbol: str = Field(..., min_length=1, max_length=10)
    # Non-positive values are rejected by the ledger, not here
    quantity: int


class TradeResponse(BaseModel):
    """Confirmation of an executed trade."""

    success: bool = True
    message: str
    side: str
    symbol: str
    quantity: int
    price: float
    amount: float
    balance: float
    portfolio: PortfolioResponse

    @classmethod
    def from_result(cls, result: TradeResult) -> "TradeResponse":
        verb = "Bought" if result.side == TradeSide.BUY else "Sold"
        return cls(
            message=f"{verb} {result.quantity} shares of {result.symbol}",
            side=result.side.value,
            symbol=result.symbol,
            quantity=result.quantity,
            price=float(result.price),
            amount=float(result.amount),
            balance=float(result.balance),
            portfolio=PortfolioResponse.from_portfolio(result.portfolio),
        )
