"""Shared fixtures: upstream payloads shaped like live ESPN and The Odds API responses."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Optional

import pytest

KICKOFF = "2026-10-19T00:20Z"


@pytest.fixture(autouse=True)
def _isolated_env(request, monkeypatch):
    """Keep developer env vars out of unit tests."""
    if request.node.get_closest_marker("integration"):
        return
    for key in list(os.environ):
        if key.startswith("LONGSHOT_") or key == "ODDS_API_KEY":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LONGSHOT_TEST_MODE", "true")


def _competitor(home_away: str, name: str, team_id: int) -> Dict[str, Any]:
    return {
        "id": str(team_id),
        "homeAway": home_away,
        "team": {"id": team_id, "displayName": name, "abbreviation": name[:3].upper()},
    }


@pytest.fixture
def espn_event() -> Callable[..., Dict[str, Any]]:
    """Build one scoreboard event with a single competition."""

    def build(
        event_id: str = "401671001",
        odds: Optional[List[Dict[str, Any]]] = None,
        home: str = "Kansas City Chiefs",
        away: str = "Buffalo Bills",
        date: str = KICKOFF,
    ) -> Dict[str, Any]:
        return {
            "id": event_id,
            "name": f"{away} at {home}",
            "shortName": "BUF @ KC",
            "date": date,
            "competitions": [
                {
                    "id": event_id,
                    "date": date,
                    "competitors": [_competitor("home", home, 12), _competitor("away", away, 2)],
                    "odds": odds if odds is not None else [],
                }
            ],
        }

    return build


@pytest.fixture
def nfl_odds() -> Dict[str, Any]:
    return {
        "provider": {"id": "58", "name": "ESPN BET", "priority": 1},
        "details": "KC -3.5",
        "overUnder": 47.5,
        "spread": -3.5,
        "moneyline": {
            "home": {"open": {"odds": "-160"}, "close": {"odds": "-175"}},
            "away": {"open": {"odds": "+135"}, "close": {"odds": "+145"}},
        },
        "pointSpread": {
            "home": {"close": {"line": "-3.5", "odds": "-110"}},
            "away": {"close": {"line": "+3.5", "odds": "-110"}},
        },
        "total": {
            "over": {"close": {"line": "o47.5", "odds": "-105"}},
            "under": {"close": {"line": "u47.5", "odds": "-115"}},
        },
    }


@pytest.fixture
def soccer_odds() -> List[Dict[str, Any]]:
    # Top-priority provider omits the draw; ESPN BET (58) is listed second
    return [
        {
            "provider": {"id": "2000", "name": "Bet 365", "priority": 1},
            "homeTeamOdds": {"moneyLine": -120},
            "awayTeamOdds": {"moneyLine": 300},
        },
        {
            "provider": {"id": 58, "name": "ESPN BET", "priority": 2},
            "homeTeamOdds": {"moneyLine": "-125", "favorite": True},
            "awayTeamOdds": {"moneyLine": "+310"},
            "drawOdds": {"moneyLine": "+260"},
            "pointSpread": {
                "home": {"close": {"line": "-0.5", "odds": "-125"}},
                "away": {"close": {"line": "+0.5", "odds": "+105"}},
            },
            "total": {
                "over": {"close": {"line": "o2.5", "odds": "-140"}},
                "under": {"close": {"line": "u2.5", "odds": "+110"}},
            },
        },
    ]


@pytest.fixture
def theodds_payload() -> List[Dict[str, Any]]:
    return [
        {
            "id": "e912304de2b2ce35b473ce2ecd3d1502",
            "sport_key": "americanfootball_nfl",
            "sport_title": "NFL",
            "commence_time": "2026-10-19T00:20:00Z",
            "home_team": "Kansas City Chiefs",
            "away_team": "Buffalo Bills",
            "bookmakers": [
                {
                    "key": "fanduel",
                    "title": "FanDuel",
                    "last_update": "2026-10-18T14:02:11Z",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Buffalo Bills", "price": 145},
                                {"name": "Kansas City Chiefs", "price": -175},
                            ],
                        },
                        {
                            "key": "spreads",
                            "outcomes": [
                                {"name": "Buffalo Bills", "price": -110, "point": 3.5},
                                {"name": "Kansas City Chiefs", "price": -110, "point": -3.5},
                            ],
                        },
                        {
                            "key": "totals",
                            "outcomes": [
                                {"name": "Over", "price": -105, "point": 47.5},
                                {"name": "Under", "price": -115, "point": 47.5},
                            ],
                        },
                    ],
                }
            ],
        },
        {
            "id": "5b1c0e6f4a7d4cb2a1f0d3c9e8b7a6f5",
            "sport_key": "soccer_epl",
            "sport_title": "EPL",
            "commence_time": "2026-10-19T14:00:00Z",
            "home_team": "Arsenal",
            "away_team": "Chelsea",
            "bookmakers": [
                {
                    "key": "fanduel",
                    "title": "FanDuel",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Arsenal", "price": -125},
                                {"name": "Chelsea", "price": 310},
                                {"name": "Draw", "price": 260},
                            ],
                        },
                        {
                            "key": "spreads",
                            "outcomes": [
                                {"name": "Arsenal", "price": -125, "point": -0.5},
                                {"name": "Chelsea", "price": 105, "point": 0.5},
                            ],
                        },
                        {
                            "key": "totals",
                            "outcomes": [
                                {"name": "Over", "price": -140, "point": 2.5},
                                {"name": "Under", "price": 110, "point": 2.5},
                            ],
                        },
                    ],
                }
            ],
        },
        {
            "id": "0c2d6e1f9a8b7c6d5e4f3a2b1c0d9e8f",
            "sport_key": "basketball_nba",
            "sport_title": "NBA",
            "commence_time": "2026-10-20T23:30:00Z",
            "home_team": "Boston Celtics",
            "away_team": "New York Knicks",
            "bookmakers": [],
        },
    ]
