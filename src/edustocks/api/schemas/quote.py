"""Pydantic schemas for stock quote API."""

from pydantic import BaseModel

from edustocks.domain.views import Quote


class QuoteResponse(BaseModel):
    """Quote for a single symbol."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    exchange: str

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.display_name,
            price=float(quote.price),
            change=float(quote.change),
            change_percent=float(quote.change_percent),
            volume=quote.volume,
            exchange=quote.exchange,
        )


class QuoteListResponse(BaseModel):
    """Quotes for the watchlist or a search."""

    items: list[QuoteResponse]
    total: int
