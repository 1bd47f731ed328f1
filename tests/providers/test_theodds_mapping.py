import copy

import pytest

from longshot.providers.theodds import category_for_sport_key, map_event, map_odds
from longshot.shared.enums import MarketKind, PriceSide, SportCategory


def _rows(event):
    return [(i.market, i.side, i.label, i.price, i.point) for i in event.items]


def test_american_event(theodds_payload):
    event = map_event(theodds_payload[0])

    assert event.sport_key == "americanfootball_nfl"
    assert event.sport_title == "NFL"
    assert event.provider_name == "FanDuel"
    assert _rows(event) == [
        (MarketKind.MONEYLINE, PriceSide.AWAY, "Buffalo Bills", 145, None),
        (MarketKind.MONEYLINE, PriceSide.HOME, "Kansas City Chiefs", -175, None),
        (MarketKind.SPREAD, PriceSide.AWAY, "Buffalo Bills +3.5", -110, 3.5),
        (MarketKind.SPREAD, PriceSide.HOME, "Kansas City Chiefs -3.5", -110, -3.5),
        (MarketKind.TOTAL, PriceSide.OVER, "Over 47.5", -105, 47.5),
        (MarketKind.TOTAL, PriceSide.UNDER, "Under 47.5", -115, 47.5),
    ]
    assert {i.sport_title for i in event.items} == {"NFL"}


def test_soccer_event_keeps_draw_and_skips_spread(theodds_payload):
    event = map_event(theodds_payload[1])

    assert [(i.market, i.side, i.label, i.price) for i in event.items] == [
        (MarketKind.MONEYLINE, PriceSide.AWAY, "Chelsea", 310),
        (MarketKind.MONEYLINE, PriceSide.HOME, "Arsenal", -125),
        (MarketKind.MONEYLINE, PriceSide.DRAW, "Draw", 260),
        (MarketKind.TOTAL, PriceSide.OVER, "Over 2.5", -140),
        (MarketKind.TOTAL, PriceSide.UNDER, "Under 2.5", 110),
    ]


def test_draw_ignored_outside_soccer(theodds_payload):
    raw = copy.deepcopy(theodds_payload[0])
    raw["bookmakers"][0]["markets"][0]["outcomes"].append({"name": "Draw", "price": 1400})

    event = map_event(raw)
    assert PriceSide.DRAW not in {i.side for i in event.items}


def test_event_without_bookmakers_has_no_items(theodds_payload):
    event = map_event(theodds_payload[2])

    assert event is not None
    assert event.items == ()
    assert event.provider_name is None


def test_first_bookmaker_is_used(theodds_payload):
    raw = copy.deepcopy(theodds_payload[0])
    raw["bookmakers"].append(
        {"key": "draftkings", "title": "DraftKings", "markets": [{"key": "h2h", "outcomes": []}]}
    )
    raw["bookmakers"].reverse()

    event = map_event(raw)
    assert event.provider_name == "DraftKings"
    assert event.items == ()


def test_unparseable_price_is_omitted(theodds_payload):
    raw = copy.deepcopy(theodds_payload[0])
    raw["bookmakers"][0]["markets"][0]["outcomes"][0]["price"] = "n/a"

    event = map_event(raw)
    assert [i.side for i in event.items_for(MarketKind.MONEYLINE)] == [PriceSide.HOME]


def test_malformed_events_are_skipped(theodds_payload):
    no_home = copy.deepcopy(theodds_payload[0])
    del no_home["home_team"]
    bad_time = copy.deepcopy(theodds_payload[1])
    bad_time["commence_time"] = "soon"

    events = map_odds([no_home, bad_time, "junk", theodds_payload[2]])
    assert [e.event_id for e in events] == [theodds_payload[2]["id"]]


def test_map_odds_keeps_payload_order(theodds_payload):
    assert [e.sport_key for e in map_odds(theodds_payload)] == [
        "americanfootball_nfl",
        "soccer_epl",
        "basketball_nba",
    ]


@pytest.mark.parametrize(
    "sport_key, expected",
    [
        ("soccer_epl", SportCategory.SOCCER),
        ("soccer_usa_mls", SportCategory.SOCCER),
        ("americanfootball_nfl", SportCategory.AMERICAN),
        ("icehockey_nhl", SportCategory.AMERICAN),
    ],
)
def test_category_for_sport_key(sport_key, expected):
    assert category_for_sport_key(sport_key) == expected
