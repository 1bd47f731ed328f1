"""Pydantic models for the odds-relevant parts of an ESPN scoreboard.

Every nested odds field is optional: ESPN omits markets, sides and whole
structures freely, and the shape differs between American sports
(moneyline / pointSpread / total with open/close snapshots) and soccer
(homeTeamOdds / awayTeamOdds / drawOdds with a flat ``moneyLine``).
Field absence is resolved into "no line item" by the mapping layer only.
"""

from __future__ import annotations

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from longshot.shared.errors import SchemaMismatch

PriceValue = Optional[Union[int, float, str]]
LineValue = Optional[Union[float, str]]


def _id_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# ESPN ids are strings but occasionally arrive as bare integers
EspnId = Annotated[str, BeforeValidator(_id_to_str)]


class _EspnModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LineSnapshot(_EspnModel):
    """One of open/close/current for a single side."""

    odds: PriceValue = None
    line: LineValue = None


class SideLine(_EspnModel):
    opening: Optional[LineSnapshot] = Field(default=None, alias="open")
    closing: Optional[LineSnapshot] = Field(default=None, alias="close")
    current: Optional[LineSnapshot] = None


class Moneyline(_EspnModel):
    home: Optional[SideLine] = None
    away: Optional[SideLine] = None
    draw: Optional[SideLine] = None


class PointSpread(_EspnModel):
    home: Optional[SideLine] = None
    away: Optional[SideLine] = None


class Total(_EspnModel):
    over: Optional[SideLine] = None
    under: Optional[SideLine] = None


class TeamOdds(_EspnModel):
    money_line: PriceValue = Field(default=None, alias="moneyLine")
    spread_odds: PriceValue = Field(default=None, alias="spreadOdds")
    favorite: Optional[bool] = None


class OddsProvider(_EspnModel):
    id: Optional[EspnId] = None
    name: Optional[str] = None
    priority: Optional[int] = None


class EspnOdds(_EspnModel):
    """One provider's quote for a competition."""

    provider: Optional[OddsProvider] = None
    details: Optional[str] = None
    over_under: LineValue = Field(default=None, alias="overUnder")
    spread: LineValue = None
    moneyline: Optional[Moneyline] = None
    point_spread: Optional[PointSpread] = Field(default=None, alias="pointSpread")
    total: Optional[Total] = None
    home_team_odds: Optional[TeamOdds] = Field(default=None, alias="homeTeamOdds")
    away_team_odds: Optional[TeamOdds] = Field(default=None, alias="awayTeamOdds")
    draw_odds: Optional[TeamOdds] = Field(default=None, alias="drawOdds")

    @property
    def provider_id(self) -> Optional[str]:
        return self.provider.id if self.provider else None

    @property
    def provider_name(self) -> str:
        if self.provider and self.provider.name:
            return self.provider.name
        return "ESPN"


class EspnTeam(_EspnModel):
    id: Optional[EspnId] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    short_display_name: Optional[str] = Field(default=None, alias="shortDisplayName")
    name: Optional[str] = None
    abbreviation: Optional[str] = None

    @property
    def label(self) -> Optional[str]:
        return self.display_name or self.short_display_name or self.name or self.abbreviation


class Competitor(_EspnModel):
    id: Optional[EspnId] = None
    home_away: Optional[str] = Field(default=None, alias="homeAway")
    team: Optional[EspnTeam] = None


class Competition(_EspnModel):
    id: Optional[EspnId] = None
    date: Optional[str] = None
    competitors: List[Competitor] = Field(default_factory=list)
    odds: List[EspnOdds] = Field(default_factory=list)

    def team_names(self) -> tuple[str, str]:
        """Return (home, away) display names or raise SchemaMismatch."""
        home = away = None
        for competitor in self.competitors:
            name = competitor.team.label if competitor.team else None
            if competitor.home_away == "home":
                home = name
            elif competitor.home_away == "away":
                away = name
        if not home or not away:
            raise SchemaMismatch(f"competition {self.id}: missing home/away competitor")
        return home, away


class EspnEvent(_EspnModel):
    id: EspnId
    name: Optional[str] = None
    short_name: Optional[str] = Field(default=None, alias="shortName")
    date: Optional[str] = None
    competitions: List[Competition] = Field(default_factory=list)

    def primary_competition(self) -> Competition:
        if not self.competitions:
            raise SchemaMismatch(f"event {self.id}: no competitions")
        return self.competitions[0]


__all__ = [
    "PriceValue",
    "LineValue",
    "LineSnapshot",
    "SideLine",
    "Moneyline",
    "PointSpread",
    "Total",
    "TeamOdds",
    "OddsProvider",
    "EspnOdds",
    "EspnTeam",
    "Competitor",
    "Competition",
    "EspnEvent",
]
