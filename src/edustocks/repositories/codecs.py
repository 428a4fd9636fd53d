"""JSON-compatible encoding of stored records."""

from decimal import Decimal
from typing import Any, Protocol, TypeVar

from edustocks.core.timezone import parse_datetime_eastern
from edustocks.domain.models import Holding, Portfolio, UserProgress

T = TypeVar("T")


class RecordCodec(Protocol[T]):
    """Converts a domain record to and from a JSON-compatible dict."""

    def to_payload(self, record: T) -> dict[str, Any]:
        ...

    def from_payload(self, payload: dict[str, Any]) -> T:
        ...


class PortfolioCodec:
    """Decimals travel as strings so no precision is lost."""

    def to_payload(self, record: Portfolio) -> dict[str, Any]:
        return {
            "user_id": record.user_id,
            "balance": str(record.balance),
            "total_value": str(record.total_value),
            "holdings": [
                {
                    "symbol": h.symbol,
                    "quantity": h.quantity,
                    "average_price": str(h.average_price),
                    "current_price": str(h.current_price),
                    "total_value": str(h.total_value),
                    "profit": str(h.profit),
                    "profit_percent": str(h.profit_percent),
                }
                for h in sorted(record.holdings.values(), key=lambda h: h.symbol)
            ],
        }

    def from_payload(self, payload: dict[str, Any]) -> Portfolio:
        holdings = {}
        for item in payload.get("holdings", []):
            holding = Holding(
                symbol=item["symbol"],
                quantity=int(item["quantity"]),
                average_price=Decimal(item["average_price"]),
                current_price=Decimal(item.get("current_price", "0")),
                total_value=Decimal(item.get("total_value", "0")),
                profit=Decimal(item.get("profit", "0")),
                profit_percent=Decimal(item.get("profit_percent", "0")),
            )
            holdings[holding.symbol] = holding
        return Portfolio(
            user_id=payload["user_id"],
            balance=Decimal(payload["balance"]),
            holdings=holdings,
            total_value=Decimal(payload.get("total_value", payload["balance"])),
        )


class UserProgressCodec:
    def to_payload(self, record: UserProgress) -> dict[str, Any]:
        return {
            "user_id": record.user_id,
            "level": record.level.value,
            "completed_lessons": list(record.completed_lessons),
            "xp": record.xp,
            "rank": record.rank.value,
            "updated_at_est": record.updated_at_est.isoformat() if record.updated_at_est else None,
        }

    def from_payload(self, payload: dict[str, Any]) -> UserProgress:
        return UserProgress(
            user_id=payload["user_id"],
            level=payload.get("level", "beginner"),
            completed_lessons=list(payload.get("completed_lessons", [])),
            xp=int(payload.get("xp", 0)),
            rank=payload.get("rank", "Novice"),
            updated_at_est=parse_datetime_eastern(payload.get("updated_at_est")),
        )
