"""ESPN scoreboard → canonical line items.

Key policies:
- Only the ``close`` snapshot of a side is read; a side without a closing
  price, or priced "OFF", produces no line item.
- American sports: Moneyline (Away, Home), Spread (Away, Home), Totals
  (Over, Under). Both spread sides are emitted.
- Soccer: three-way Moneyline (Away, Home, Draw) from the team-odds block,
  falling back to the moneyline structure per side; Totals as American;
  never a Spread.
- A malformed event (fails validation, no competition, missing home/away)
  yields no Event and is logged. A well-formed event without priced lines
  yields an Event with zero items; the range filter drops it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

import bittensor as bt
from pydantic import ValidationError

from longshot.lines.selector import PREFERRED_SOCCER_PROVIDER_ID, select_quote
from longshot.lines.types import Event, LineItem
from longshot.shared.enums import MarketKind, PriceSide, SportCategory
from longshot.shared.errors import SchemaMismatch
from longshot.shared.price import format_point, parse_price
from longshot.shared.timeutil import parse_iso_datetime

from .leagues import EspnLeague
from .models import Competition, EspnEvent, EspnOdds, LineSnapshot, LineValue, SideLine, TeamOdds


@dataclass(frozen=True)
class _ItemFactory:
    event_id: str
    provider_name: str
    event_time: datetime
    sport_title: str

    def make(
        self,
        market: MarketKind,
        side: PriceSide,
        label: str,
        price: int,
        point: Optional[float] = None,
    ) -> LineItem:
        return LineItem(
            event_id=self.event_id,
            market=market,
            side=side,
            label=label,
            price=price,
            provider_name=self.provider_name,
            event_time=self.event_time,
            sport_title=self.sport_title,
            point=point,
        )


def _closing(side: Optional[SideLine]) -> Optional[LineSnapshot]:
    return side.closing if side is not None else None


def parse_line(value: LineValue) -> Optional[float]:
    """Read a spread/total line: 47.5, "o47.5", "u47.5", "+3.5", "PK"."""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value).strip().lower()
    if text in ("pk", "pick", "even"):
        return 0.0
    if text[:1] in ("o", "u"):
        text = text[1:]
    try:
        return float(text)
    except ValueError:
        return None


def _legacy_spread(quote: EspnOdds, side: PriceSide) -> Optional[float]:
    # Legacy ``spread`` is quoted from the home side
    home_line = parse_line(quote.spread)
    if home_line is None:
        return None
    return home_line if side == PriceSide.HOME else -home_line


def _spread_items(make: _ItemFactory, home: str, away: str, quote: EspnOdds) -> List[LineItem]:
    items: List[LineItem] = []
    spread = quote.point_spread
    for side, team in ((PriceSide.AWAY, away), (PriceSide.HOME, home)):
        snap = _closing(getattr(spread, side.value) if spread else None)
        if snap is None:
            continue
        price = parse_price(snap.odds)
        if price is None:
            continue
        point = parse_line(snap.line)
        if point is None:
            point = _legacy_spread(quote, side)
        label = f"{team} {format_point(point)}" if point is not None else team
        items.append(make.make(MarketKind.SPREAD, side, label, price, point))
    return items


def _total_items(make: _ItemFactory, quote: EspnOdds) -> List[LineItem]:
    items: List[LineItem] = []
    total = quote.total
    for side, word in ((PriceSide.OVER, "Over"), (PriceSide.UNDER, "Under")):
        snap = _closing(getattr(total, side.value) if total else None)
        if snap is None:
            continue
        price = parse_price(snap.odds)
        if price is None:
            continue
        point = parse_line(snap.line)
        if point is None:
            point = parse_line(quote.over_under)
        label = f"{word} {point:g}" if point is not None else word
        items.append(make.make(MarketKind.TOTAL, side, label, price, point))
    return items


def _normalize_american(make: _ItemFactory, home: str, away: str, quote: EspnOdds) -> List[LineItem]:
    items: List[LineItem] = []
    moneyline = quote.moneyline
    for side, team in ((PriceSide.AWAY, away), (PriceSide.HOME, home)):
        snap = _closing(getattr(moneyline, side.value) if moneyline else None)
        price = parse_price(snap.odds) if snap is not None else None
        if price is not None:
            items.append(make.make(MarketKind.MONEYLINE, side, team, price))
    items.extend(_spread_items(make, home, away, quote))
    items.extend(_total_items(make, quote))
    return items


def _three_way_price(team_odds: Optional[TeamOdds], fallback: Optional[SideLine]) -> Optional[int]:
    if team_odds is not None and team_odds.money_line is not None:
        return parse_price(team_odds.money_line)
    snap = _closing(fallback)
    return parse_price(snap.odds) if snap is not None else None


def _normalize_soccer(make: _ItemFactory, home: str, away: str, quote: EspnOdds) -> List[LineItem]:
    items: List[LineItem] = []
    moneyline = quote.moneyline
    outcomes = (
        (PriceSide.AWAY, away, quote.away_team_odds),
        (PriceSide.HOME, home, quote.home_team_odds),
        (PriceSide.DRAW, "Draw", quote.draw_odds),
    )
    for side, label, team_odds in outcomes:
        fallback = getattr(moneyline, side.value) if moneyline else None
        price = _three_way_price(team_odds, fallback)
        if price is not None:
            items.append(make.make(MarketKind.MONEYLINE, side, label, price))
    items.extend(_total_items(make, quote))
    return items


_NORMALIZERS: Dict[SportCategory, Callable[[_ItemFactory, str, str, EspnOdds], List[LineItem]]] = {
    SportCategory.AMERICAN: _normalize_american,
    SportCategory.SOCCER: _normalize_soccer,
}


def _event_time(event: EspnEvent, competition: Competition) -> datetime:
    event_time = parse_iso_datetime(competition.date) or parse_iso_datetime(event.date)
    if event_time is None:
        raise SchemaMismatch(f"event {event.id}: missing or invalid date")
    return event_time


def normalize(
    event: EspnEvent,
    competition: Competition,
    quote: Optional[EspnOdds],
    category: SportCategory,
    sport_title: str = "",
) -> List[LineItem]:
    """Map the selected quote of one competition to line items.

    Raises SchemaMismatch when the competition lacks a home/away pair or a date.
    """
    if quote is None:
        return []
    home, away = competition.team_names()
    make = _ItemFactory(
        event_id=event.id,
        provider_name=quote.provider_name,
        event_time=_event_time(event, competition),
        sport_title=sport_title,
    )
    return _NORMALIZERS[category](make, home, away, quote)


def map_event(
    raw: Mapping[str, Any],
    league: EspnLeague,
    preferred_provider_id: Optional[str] = PREFERRED_SOCCER_PROVIDER_ID,
) -> Optional[Event]:
    try:
        event = EspnEvent.model_validate(raw)
        competition = event.primary_competition()
        home, away = competition.team_names()
        event_time = _event_time(event, competition)
        quote = select_quote(competition.odds, league.category, preferred_provider_id)
        items = normalize(event, competition, quote, league.category, sport_title=league.title)
    except (ValidationError, SchemaMismatch) as exc:
        bt.logging.debug(
            {
                "espn_schema_mismatch": {
                    "league": league.code,
                    "event_id": raw.get("id") if isinstance(raw, Mapping) else None,
                    "error": (str(exc).splitlines() or [""])[0],
                }
            }
        )
        return None
    return Event(
        event_id=event.id,
        sport_key=league.sport_key,
        sport_title=league.title,
        home_team=home,
        away_team=away,
        event_time=event_time,
        provider_name=quote.provider_name if quote is not None else None,
        items=tuple(items),
    )


def map_scoreboard(
    payload: Mapping[str, Any],
    league: EspnLeague,
    preferred_provider_id: Optional[str] = PREFERRED_SOCCER_PROVIDER_ID,
) -> List[Event]:
    """Map every scoreboard event; malformed ones are skipped, not fatal."""
    raw_events: Iterable[Any] = payload.get("events") or []
    if not isinstance(raw_events, list):
        bt.logging.debug({"espn_schema_mismatch": {"league": league.code, "error": "events is not a list"}})
        return []
    events: List[Event] = []
    for raw in raw_events:
        if not isinstance(raw, Mapping):
            continue
        mapped = map_event(raw, league, preferred_provider_id)
        if mapped is not None:
            events.append(mapped)
    bt.logging.debug({"espn_scoreboard_mapped": {"league": league.code, "raw_count": len(raw_events), "event_count": len(events)}})
    return events


__all__ = ["parse_line", "normalize", "map_event", "map_scoreboard"]
