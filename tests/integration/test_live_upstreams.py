"""Integration tests against the live upstreams.

ESPN needs only network access; The Odds API also needs a key and costs one
request of the monthly quota per sport.
"""

import os

import pytest

from longshot.lines.types import OddsRange
from longshot.providers.espn import EspnScoreboardClient, map_scoreboard, resolve_league
from longshot.providers.theodds import TheOddsClient, map_odds

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.getenv("LONGSHOT_RUN_INTEGRATION") != "1",
        reason="LONGSHOT_RUN_INTEGRATION not set",
    ),
]


@pytest.mark.asyncio
async def test_espn_scoreboard_maps():
    league = resolve_league("epl")
    async with EspnScoreboardClient() as client:
        payload = await client.fetch_scoreboard(league)

    events = map_scoreboard(payload, league)
    for event in events:
        assert event.sport_key == "espn_epl"
        for item in event.items:
            assert item.price is not None


@pytest.mark.asyncio
@pytest.mark.skipif(not os.getenv("ODDS_API_KEY"), reason="ODDS_API_KEY not set")
async def test_theodds_upcoming():
    async with TheOddsClient() as client:
        payload = await client.fetch_odds()
        assert client.requests_remaining is not None

    window = OddsRange(-1500, 1500)
    for event in map_odds(payload):
        assert all(window.contains(item.price) for item in event.items)
