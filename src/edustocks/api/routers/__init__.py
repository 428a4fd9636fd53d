"""API routers package."""

from edustocks.api.routers.auth import router as auth_router
from edustocks.api.routers.stocks import router as stocks_router
from edustocks.api.routers.portfolio import router as portfolio_router
from edustocks.api.routers.progress import router as progress_router
from edustocks.api.routers.lessons import router as lessons_router
from edustocks.api.routers.ai_trainer import router as ai_trainer_router

__all__ = [
    "auth_router",
    "stocks_router",
    "portfolio_router",
    "progress_router",
    "lessons_router",
    "ai_trainer_router",
]
