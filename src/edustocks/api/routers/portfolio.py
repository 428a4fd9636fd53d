"""Portfolio API: holdings valuation and simulated trades."""

from fastapi import APIRouter, Depends

from edustocks.api.deps import get_current_user, get_portfolio_ledger
from edustocks.api.schemas import PortfolioResponse, TradeRequest, TradeResponse
from edustocks.auth import VerifiedUser
from edustocks.services import PortfolioLedger

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    user: VerifiedUser = Depends(get_current_user),
    ledger: PortfolioLedger = Depends(get_portfolio_ledger),
):
    """Return the caller's portfolio valued at current prices."""
    return PortfolioResponse.from_portfolio(ledger.get_portfolio(user.user_id))


@router.post("/buy", response_model=TradeResponse)
def buy(
    data: TradeRequest,
    user: VerifiedUser = Depends(get_current_user),
    ledger: PortfolioLedger = Depends(get_portfolio_ledger),
):
    result = ledger.buy(user.user_id, data.symbol, data.quantity)
    return TradeResponse.from_result(result)


@router.post("/sell", response_model=TradeResponse)
def sell(
    data: TradeRequest,
    user: VerifiedUser = Depends(get_current_user),
    ledger: PortfolioLedger = Depends(get_portfolio_ledger),
):
    result = ledger.sell(user.user_id, data.symbol, data.quantity)
    return TradeResponse.from_result(result)
