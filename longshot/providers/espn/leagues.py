"""ESPN league catalog: short codes → scoreboard paths and odds shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from longshot.shared.enums import SportCategory


@dataclass(frozen=True)
class EspnLeague:
    code: str
    sport_path: str
    title: str
    category: SportCategory

    @property
    def sport_key(self) -> str:
        return f"espn_{self.code}"


_AMERICAN = SportCategory.AMERICAN
_SOCCER = SportCategory.SOCCER

LEAGUES: Dict[str, EspnLeague] = {
    league.code: league
    for league in (
        EspnLeague("nfl", "football/nfl", "NFL", _AMERICAN),
        EspnLeague("ncaaf", "football/college-football", "NCAAF", _AMERICAN),
        EspnLeague("nba", "basketball/nba", "NBA", _AMERICAN),
        EspnLeague("wnba", "basketball/wnba", "WNBA", _AMERICAN),
        EspnLeague("ncaab", "basketball/mens-college-basketball", "NCAAB", _AMERICAN),
        EspnLeague("mlb", "baseball/mlb", "MLB", _AMERICAN),
        EspnLeague("nhl", "hockey/nhl", "NHL", _AMERICAN),
        EspnLeague("epl", "soccer/eng.1", "EPL", _SOCCER),
        EspnLeague("laliga", "soccer/esp.1", "La Liga", _SOCCER),
        EspnLeague("bundesliga", "soccer/ger.1", "Bundesliga", _SOCCER),
        EspnLeague("seriea", "soccer/ita.1", "Serie A", _SOCCER),
        EspnLeague("ligue1", "soccer/fra.1", "Ligue 1", _SOCCER),
        EspnLeague("mls", "soccer/usa.1", "MLS", _SOCCER),
        EspnLeague("ucl", "soccer/uefa.champions", "UEFA Champions League", _SOCCER),
    )
}

_BY_PATH: Dict[str, EspnLeague] = {league.sport_path: league for league in LEAGUES.values()}


def category_for_path(sport_path: str) -> SportCategory:
    return SportCategory.SOCCER if sport_path.split("/", 1)[0] == "soccer" else SportCategory.AMERICAN


def resolve_league(value: "EspnLeague | str") -> EspnLeague:
    """Accept a league, a short code ("nfl") or a raw path ("soccer/eng.2")."""
    if isinstance(value, EspnLeague):
        return value
    key = value.strip().lower()
    league: Optional[EspnLeague] = LEAGUES.get(key) or _BY_PATH.get(key)
    if league is not None:
        return league
    if "/" in key:
        sport, _, slug = key.partition("/")
        if sport and slug:
            return EspnLeague(code=slug, sport_path=key, title=slug.upper(), category=category_for_path(key))
    raise ValueError(f"Unknown ESPN league: {value}")


__all__ = ["EspnLeague", "LEAGUES", "category_for_path", "resolve_league"]
