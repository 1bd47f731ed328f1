from __future__ import annotations

from enum import Enum


class MarketKind(str, Enum):
    MONEYLINE = "moneyline"
    SPREAD = "spread"
    TOTAL = "total"


class PriceSide(str, Enum):
    HOME = "home"
    AWAY = "away"
    DRAW = "draw"
    OVER = "over"
    UNDER = "under"


class SportCategory(str, Enum):
    """Upstream odds shape family. Soccer carries a three-way moneyline."""

    AMERICAN = "american"
    SOCCER = "soccer"


class OddsSource(str, Enum):
    THE_ODDS_API = "theodds"
    ESPN = "espn"


class GameStatusKind(str, Enum):
    LIVE = "live"
    TODAY = "today"
    FUTURE = "future"


MARKET_LABELS = {
    MarketKind.MONEYLINE: "Moneyline",
    MarketKind.SPREAD: "Spread",
    MarketKind.TOTAL: "Totals",
}


__all__ = [
    "MarketKind",
    "PriceSide",
    "SportCategory",
    "OddsSource",
    "GameStatusKind",
    "MARKET_LABELS",
]
