"""The Odds API v4 payload models (``/sports/{sport}/odds``)."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PriceValue = Optional[Union[int, float, str]]


class _OddsApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OddsApiOutcome(_OddsApiModel):
    name: str
    price: PriceValue = None
    point: Optional[float] = None


class OddsApiMarket(_OddsApiModel):
    key: str
    last_update: Optional[str] = None
    outcomes: List[OddsApiOutcome] = Field(default_factory=list)


class Bookmaker(_OddsApiModel):
    """One bookmaker's quote for an event."""

    key: str
    title: Optional[str] = None
    last_update: Optional[str] = None
    markets: List[OddsApiMarket] = Field(default_factory=list)

    @property
    def provider_id(self) -> Optional[str]:
        return self.key

    @property
    def provider_name(self) -> str:
        return self.title or self.key

    def market(self, key: str) -> Optional[OddsApiMarket]:
        for market in self.markets:
            if market.key == key:
                return market
        return None


class OddsApiEvent(_OddsApiModel):
    id: str
    sport_key: str
    sport_title: Optional[str] = None
    commence_time: str
    home_team: str
    away_team: str
    bookmakers: List[Bookmaker] = Field(default_factory=list)


__all__ = ["PriceValue", "OddsApiOutcome", "OddsApiMarket", "Bookmaker", "OddsApiEvent"]
