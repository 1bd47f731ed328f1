"""The Odds API provider: payload models, client, and line-item mapping."""

from .models import Bookmaker, OddsApiEvent, OddsApiMarket, OddsApiOutcome
from .mapping import MARKET_KEYS, category_for_sport_key, map_event, map_odds, normalize_event
from .client import THEODDS_API_BASE, UPCOMING, TheOddsClient

__all__ = [
    "Bookmaker",
    "OddsApiEvent",
    "OddsApiMarket",
    "OddsApiOutcome",
    "MARKET_KEYS",
    "category_for_sport_key",
    "map_event",
    "map_odds",
    "normalize_event",
    "THEODDS_API_BASE",
    "UPCOMING",
    "TheOddsClient",
]
