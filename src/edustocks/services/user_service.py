"""User initialization on first verified sign-in."""

from edustocks.domain.models import Portfolio, UserProgress
from edustocks.services.portfolio_ledger import PortfolioLedger
from edustocks.services.progress_tracker import ProgressTracker


class UserService:
    def __init__(self, ledger: PortfolioLedger, progress_tracker: ProgressTracker):
        self._ledger = ledger
        self._progress = progress_tracker

    def initialize_user(self, user_id: str) -> tuple[UserProgress, Portfolio]:
        """Ensure the user has a progress record and a portfolio."""
        progress = self._progress.get_progress(user_id)
        portfolio = self._ledger.get_portfolio(user_id)
        return progress, portfolio
