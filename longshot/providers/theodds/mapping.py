"""The Odds API events → canonical line items.

Market keys map as h2h → Moneyline, spreads → Spread, totals → Totals.
Moneyline and spread outcomes are matched to sides by team name; a "Draw"
outcome is kept for soccer only, and soccer never emits a Spread.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import bittensor as bt
from pydantic import ValidationError

from longshot.lines.selector import select_quote
from longshot.lines.types import Event, LineItem
from longshot.shared.enums import MarketKind, PriceSide, SportCategory
from longshot.shared.errors import SchemaMismatch
from longshot.shared.price import format_point, parse_price
from longshot.shared.timeutil import parse_iso_datetime

from .models import Bookmaker, OddsApiEvent, OddsApiOutcome

MARKET_KEYS = {
    MarketKind.MONEYLINE: "h2h",
    MarketKind.SPREAD: "spreads",
    MarketKind.TOTAL: "totals",
}


def category_for_sport_key(sport_key: str) -> SportCategory:
    return SportCategory.SOCCER if sport_key.startswith("soccer") else SportCategory.AMERICAN


def _sides_by_team(
    outcomes: Iterable[OddsApiOutcome],
    event: OddsApiEvent,
    allow_draw: bool,
) -> Dict[PriceSide, OddsApiOutcome]:
    found: Dict[PriceSide, OddsApiOutcome] = {}
    for outcome in outcomes:
        if outcome.name == event.away_team:
            found.setdefault(PriceSide.AWAY, outcome)
        elif outcome.name == event.home_team:
            found.setdefault(PriceSide.HOME, outcome)
        elif allow_draw and outcome.name.strip().lower() == "draw":
            found.setdefault(PriceSide.DRAW, outcome)
    return found


def normalize_event(
    event: OddsApiEvent,
    quote: Optional[Bookmaker],
    category: SportCategory,
    sport_title: Optional[str] = None,
) -> List[LineItem]:
    """Map the selected bookmaker of one event to line items."""
    if quote is None:
        return []
    event_time = parse_iso_datetime(event.commence_time)
    if event_time is None:
        raise SchemaMismatch(f"event {event.id}: invalid commence_time {event.commence_time!r}")
    title = sport_title or event.sport_title or event.sport_key
    soccer = category == SportCategory.SOCCER

    def make(market: MarketKind, side: PriceSide, label: str, price: int, point: Optional[float] = None) -> LineItem:
        return LineItem(
            event_id=event.id,
            market=market,
            side=side,
            label=label,
            price=price,
            provider_name=quote.provider_name,
            event_time=event_time,
            sport_title=title,
            point=point,
        )

    items: List[LineItem] = []

    h2h = quote.market(MARKET_KEYS[MarketKind.MONEYLINE])
    if h2h is not None:
        sides = _sides_by_team(h2h.outcomes, event, allow_draw=soccer)
        for side in (PriceSide.AWAY, PriceSide.HOME, PriceSide.DRAW):
            outcome = sides.get(side)
            price = parse_price(outcome.price) if outcome is not None else None
            if price is not None:
                items.append(make(MarketKind.MONEYLINE, side, outcome.name, price))

    spreads = None if soccer else quote.market(MARKET_KEYS[MarketKind.SPREAD])
    if spreads is not None:
        sides = _sides_by_team(spreads.outcomes, event, allow_draw=False)
        for side in (PriceSide.AWAY, PriceSide.HOME):
            outcome = sides.get(side)
            price = parse_price(outcome.price) if outcome is not None else None
            if price is None:
                continue
            label = outcome.name if outcome.point is None else f"{outcome.name} {format_point(outcome.point)}"
            items.append(make(MarketKind.SPREAD, side, label, price, outcome.point))

    totals = quote.market(MARKET_KEYS[MarketKind.TOTAL])
    if totals is not None:
        by_name = {o.name.strip().lower(): o for o in totals.outcomes}
        for side, word in ((PriceSide.OVER, "Over"), (PriceSide.UNDER, "Under")):
            outcome = by_name.get(side.value)
            price = parse_price(outcome.price) if outcome is not None else None
            if price is None:
                continue
            label = word if outcome.point is None else f"{word} {outcome.point:g}"
            items.append(make(MarketKind.TOTAL, side, label, price, outcome.point))

    return items


def map_event(raw: Mapping[str, Any], preferred_bookmaker: Optional[str] = None) -> Optional[Event]:
    try:
        event = OddsApiEvent.model_validate(raw)
        category = category_for_sport_key(event.sport_key)
        quote = select_quote(event.bookmakers, category, preferred_bookmaker)
        event_time = parse_iso_datetime(event.commence_time)
        if event_time is None:
            raise SchemaMismatch(f"event {event.id}: invalid commence_time {event.commence_time!r}")
        items = normalize_event(event, quote, category)
    except (ValidationError, SchemaMismatch) as exc:
        bt.logging.debug(
            {
                "theodds_schema_mismatch": {
                    "event_id": raw.get("id") if isinstance(raw, Mapping) else None,
                    "error": (str(exc).splitlines() or [""])[0],
                }
            }
        )
        return None
    return Event(
        event_id=event.id,
        sport_key=event.sport_key,
        sport_title=event.sport_title or event.sport_key,
        home_team=event.home_team,
        away_team=event.away_team,
        event_time=event_time,
        provider_name=quote.provider_name if quote is not None else None,
        items=tuple(items),
    )


def map_odds(payload: Iterable[Any], preferred_bookmaker: Optional[str] = None) -> List[Event]:
    """Map an odds response; malformed events are skipped, not fatal."""
    events: List[Event] = []
    raw_count = 0
    for raw in payload:
        raw_count += 1
        if not isinstance(raw, Mapping):
            continue
        mapped = map_event(raw, preferred_bookmaker)
        if mapped is not None:
            events.append(mapped)
    bt.logging.debug({"theodds_odds_mapped": {"raw_count": raw_count, "event_count": len(events)}})
    return events


__all__ = ["MARKET_KEYS", "category_for_sport_key", "normalize_event", "map_event", "map_odds"]
