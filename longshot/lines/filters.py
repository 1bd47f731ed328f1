"""Odds-range and sport filtering over normalized events.

Partial-match policy: an event is kept with only the line items whose price
falls inside the range; it is dropped only when none of them do. Items
priced Unavailable never match. All functions are pure and keep input order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence

from longshot.lines.types import Event, LineItem, OddsRange

ALL_SPORTS = "all"


@dataclass(frozen=True)
class SportOption:
    key: str
    title: str


def item_in_range(item: LineItem, odds_range: OddsRange) -> bool:
    return odds_range.contains(item.price)


def has_odds_in_range(event: Event, odds_range: OddsRange) -> bool:
    return any(item_in_range(item, odds_range) for item in event.items)


def filter_event(event: Event, odds_range: OddsRange) -> Optional[Event]:
    """Return a copy of event with only in-range items, or None if none remain."""
    kept = tuple(item for item in event.items if item_in_range(item, odds_range))
    if not kept:
        return None
    if len(kept) == len(event.items):
        return event
    return replace(event, items=kept)


def filter_events(events: Iterable[Event], odds_range: OddsRange) -> List[Event]:
    out: List[Event] = []
    for event in events:
        filtered = filter_event(event, odds_range)
        if filtered is not None:
            out.append(filtered)
    return out


def filter_by_sport(events: Iterable[Event], sport_key: Optional[str] = ALL_SPORTS) -> List[Event]:
    if sport_key is None or sport_key == ALL_SPORTS:
        return list(events)
    return [event for event in events if event.sport_key == sport_key]


def available_sports(events: Iterable[Event]) -> List[SportOption]:
    """Unique sports present in events, sorted by display title."""
    seen: Dict[str, SportOption] = {}
    for event in events:
        # later titles win, matching a key→title map built in order
        seen[event.sport_key] = SportOption(key=event.sport_key, title=event.sport_title)
    return sorted(seen.values(), key=lambda s: (s.title.lower(), s.key))


def summarize(shown: Sequence[Event], total: int) -> str:
    return f"Showing {len(shown)} of {total} games"


__all__ = [
    "ALL_SPORTS",
    "SportOption",
    "item_in_range",
    "has_odds_in_range",
    "filter_event",
    "filter_events",
    "filter_by_sport",
    "available_sports",
    "summarize",
]
