"""Tests for lines/filters.py - partial-match odds range filtering."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from longshot.lines.filters import (
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
from longshot.lines.types import Event, LineItem, OddsRange
from longshot.shared.enums import MarketKind, PriceSide

T0 = datetime(2026, 10, 19, 0, 20, tzinfo=timezone.utc)

_SIDES = [
    (MarketKind.MONEYLINE, PriceSide.AWAY),
    (MarketKind.MONEYLINE, PriceSide.HOME),
    (MarketKind.SPREAD, PriceSide.AWAY),
    (MarketKind.SPREAD, PriceSide.HOME),
    (MarketKind.TOTAL, PriceSide.OVER),
    (MarketKind.TOTAL, PriceSide.UNDER),
]


def _event(event_id, *prices, sport_key="americanfootball_nfl", sport_title="NFL"):
    items = tuple(
        LineItem(
            event_id=event_id,
            market=market,
            side=side,
            label=f"{market.value} {side.value}",
            price=price,
            provider_name="FanDuel",
            event_time=T0,
            sport_title=sport_title,
        )
        for (market, side), price in zip(_SIDES, prices)
    )
    return Event(
        event_id=event_id,
        sport_key=sport_key,
        sport_title=sport_title,
        home_team="Home",
        away_team="Away",
        event_time=T0,
        provider_name="FanDuel",
        items=items,
    )


@pytest.fixture
def events():
    return [
        _event("a", 120, -400),
        _event("b", None, None),
        _event("c", -110, -110, -105, -115),
        _event("d", 900, -1400, sport_key="soccer_epl", sport_title="EPL"),
        _event("e"),
    ]


def test_partial_match_keeps_only_in_range_items():
    result = filter_events([_event("a", 120, -400)], OddsRange(-200, 200))

    assert len(result) == 1
    assert [item.price for item in result[0].items] == [120]


def test_event_with_only_unavailable_prices_is_dropped():
    assert filter_events([_event("b", None, None)], OddsRange(-1500, 1500)) == []


def test_event_without_items_is_dropped():
    assert filter_event(_event("e"), OddsRange(-1500, 1500)) is None


def test_fully_matching_event_is_returned_as_is():
    event = _event("c", -110, -110, -105, -115)
    assert filter_event(event, OddsRange(-200, 200)) is event


def test_every_kept_item_is_in_range(events):
    window = OddsRange(-300, 300)
    for event in filter_events(events, window):
        assert event.items
        assert all(window.low <= item.price <= window.high for item in event.items)


def test_filter_is_idempotent(events):
    window = OddsRange(-200, 200)
    once = filter_events(events, window)
    assert filter_events(once, window) == once


def test_widening_the_range_never_drops_events_or_items(events):
    narrow = {e.event_id: e for e in filter_events(events, OddsRange(-200, 200))}
    wide = {e.event_id: e for e in filter_events(events, OddsRange(-500, 500))}

    assert set(narrow) <= set(wide)
    for event_id, event in narrow.items():
        assert set(event.items) <= set(wide[event_id].items)


def test_filter_is_pure_and_keeps_order(events):
    before = list(events)
    result = filter_events(events, OddsRange(-1500, 1500))

    assert events == before
    assert [e.event_id for e in result] == ["a", "c", "d"]


def test_item_order_is_preserved():
    event = _event("c", 150, -400, -110, 300, -105, -115)
    kept = filter_event(event, OddsRange(-200, 200))
    assert [(i.market, i.side) for i in kept.items] == [
        (MarketKind.MONEYLINE, PriceSide.AWAY),
        (MarketKind.SPREAD, PriceSide.AWAY),
        (MarketKind.TOTAL, PriceSide.OVER),
        (MarketKind.TOTAL, PriceSide.UNDER),
    ]


def test_item_and_event_predicates():
    event = _event("a", 120, -400)
    assert item_in_range(event.items[0], OddsRange(100, 200))
    assert not item_in_range(event.items[1], OddsRange(100, 200))
    assert has_odds_in_range(event, OddsRange(-500, -300))
    assert not has_odds_in_range(event, OddsRange(-200, 100))
    assert not has_odds_in_range(_event("b", None), OddsRange(-1500, 1500))


class TestSportFilter:
    def test_all_keeps_everything(self, events):
        assert filter_by_sport(events, ALL_SPORTS) == events
        assert filter_by_sport(events, None) == events

    def test_exact_sport_key(self, events):
        assert [e.event_id for e in filter_by_sport(events, "soccer_epl")] == ["d"]
        assert filter_by_sport(events, "basketball_nba") == []

    def test_available_sports_sorted_by_title(self, events):
        extra = replace(_event("f", 100), sport_key="basketball_nba", sport_title="NBA")
        assert available_sports(events + [extra]) == [
            SportOption("soccer_epl", "EPL"),
            SportOption("basketball_nba", "NBA"),
            SportOption("americanfootball_nfl", "NFL"),
        ]


def test_summarize():
    assert summarize([_event("a", 100)], 3) == "Showing 1 of 3 games"
    assert summarize([], 0) == "Showing 0 of 0 games"
