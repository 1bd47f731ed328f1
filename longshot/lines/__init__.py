"""Canonical line items, quote selection, and range filtering."""

from .types import DEFAULT_ODDS_RANGE, ODDS_RANGE_LIMIT, Event, LineItem, OddsRange
from .selector import PREFERRED_SOCCER_PROVIDER_ID, select_quote
from .filters import (
    ALL_SPORTS,
    SportOption,
    available_sports,
    filter_by_sport,
    filter_event,
    filter_events,
    has_odds_in_range,
    item_in_range,
    summarize,
)

__all__ = [
    "DEFAULT_ODDS_RANGE",
    "ODDS_RANGE_LIMIT",
    "Event",
    "LineItem",
    "OddsRange",
    "PREFERRED_SOCCER_PROVIDER_ID",
    "select_quote",
    "ALL_SPORTS",
    "SportOption",
    "available_sports",
    "filter_by_sport",
    "filter_event",
    "filter_events",
    "has_odds_in_range",
    "item_in_range",
    "summarize",
]
