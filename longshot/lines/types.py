"""Canonical odds line items and events.

A LineItem is the unit of display and filtering: one priced outcome of one
market for one event. ``price`` is American odds; None means Unavailable
(the upstream sentinel "OFF" or an unparseable value).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from longshot.shared.enums import MarketKind, PriceSide

ODDS_RANGE_LIMIT = 1500
DEFAULT_ODDS_RANGE = (-1000, 1000)

_SIDES_BY_MARKET = {
    MarketKind.MONEYLINE: {PriceSide.AWAY, PriceSide.HOME, PriceSide.DRAW},
    MarketKind.SPREAD: {PriceSide.AWAY, PriceSide.HOME},
    MarketKind.TOTAL: {PriceSide.OVER, PriceSide.UNDER},
}


@dataclass(frozen=True)
class LineItem:
    event_id: str
    market: MarketKind
    side: PriceSide
    label: str
    price: Optional[int]
    provider_name: str
    event_time: datetime
    sport_title: str
    point: Optional[float] = None

    def __post_init__(self) -> None:
        if self.side not in _SIDES_BY_MARKET[self.market]:
            raise ValueError(f"side {self.side.value} is not valid for {self.market.value}")

    @property
    def is_available(self) -> bool:
        return self.price is not None


@dataclass(frozen=True)
class Event:
    """One upstream event with its line items, in normalizer order."""

    event_id: str
    sport_key: str
    sport_title: str
    home_team: str
    away_team: str
    event_time: datetime
    provider_name: Optional[str] = None
    items: Tuple[LineItem, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return f"{self.away_team} @ {self.home_team}"

    def items_for(self, market: MarketKind) -> Tuple[LineItem, ...]:
        return tuple(item for item in self.items if item.market == market)


@dataclass(frozen=True)
class OddsRange:
    """Inclusive American-odds window chosen by the user (risk level)."""

    low: int = DEFAULT_ODDS_RANGE[0]
    high: int = DEFAULT_ODDS_RANGE[1]

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        if self.low < -ODDS_RANGE_LIMIT or self.high > ODDS_RANGE_LIMIT:
            raise ValueError(f"range must lie within [-{ODDS_RANGE_LIMIT}, {ODDS_RANGE_LIMIT}]")

    def contains(self, price: Optional[int]) -> bool:
        return price is not None and self.low <= price <= self.high

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"


__all__ = ["ODDS_RANGE_LIMIT", "DEFAULT_ODDS_RANGE", "LineItem", "Event", "OddsRange"]
