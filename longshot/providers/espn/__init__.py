"""ESPN scoreboard provider.

Pydantic models for scoreboard odds, the league catalog, the async client,
and the mapping of a competition's selected quote to canonical line items.
"""

from .leagues import LEAGUES, EspnLeague, category_for_path, resolve_league
from .models import (
    Competition,
    Competitor,
    EspnEvent,
    EspnOdds,
    EspnTeam,
    LineSnapshot,
    Moneyline,
    OddsProvider,
    PointSpread,
    SideLine,
    TeamOdds,
    Total,
)
from .mapping import map_event, map_scoreboard, normalize, parse_line
from .client import ESPN_API_BASE, EspnScoreboardClient

__all__ = [
    "LEAGUES",
    "EspnLeague",
    "category_for_path",
    "resolve_league",
    "Competition",
    "Competitor",
    "EspnEvent",
    "EspnOdds",
    "EspnTeam",
    "LineSnapshot",
    "Moneyline",
    "OddsProvider",
    "PointSpread",
    "SideLine",
    "TeamOdds",
    "Total",
    "map_event",
    "map_scoreboard",
    "normalize",
    "parse_line",
    "ESPN_API_BASE",
    "EspnScoreboardClient",
]
