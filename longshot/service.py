"""Odds service: fetch → normalize → filter.

The single entry point a caller needs is ``OddsService.get_filtered_events``.
Raw payloads go through the injected cache; line items are derived fresh on
every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import bittensor as bt

from longshot.config import Settings
from longshot.lines.filters import (
    ALL_SPORTS,
    SportOption,
    available_sports,
    filter_by_sport,
    filter_events,
    summarize,
)
from longshot.lines.types import Event, OddsRange
from longshot.providers.espn import EspnScoreboardClient, map_scoreboard, resolve_league
from longshot.providers.theodds import UPCOMING, TheOddsClient, map_odds
from longshot.shared.cache import CacheStore, TTLCache
from longshot.shared.enums import OddsSource

DEFAULT_SPORTS = {
    OddsSource.THE_ODDS_API: UPCOMING,
    OddsSource.ESPN: "nfl",
}


@dataclass(frozen=True)
class OddsBoard:
    """Render-ready result: filtered events plus the context a view needs."""

    events: List[Event]
    total: int
    sports: List[SportOption] = field(default_factory=list)
    odds_range: OddsRange = field(default_factory=OddsRange)
    sport_filter: str = ALL_SPORTS

    @property
    def summary(self) -> str:
        return summarize(self.events, self.total)


class OddsService:
    """Wires the fetch clients, the cache gate and the odds engine together.

    Clients are created lazily so a missing Odds API key only matters when
    that source is actually queried.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        cache: Optional[CacheStore] = None,
        theodds: Optional[TheOddsClient] = None,
        espn: Optional[EspnScoreboardClient] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.cache: CacheStore = cache if cache is not None else TTLCache[Any](
            ttl_seconds=self.settings.cache.theodds_ttl_seconds
        )
        self._theodds = theodds
        self._espn = espn

    @property
    def theodds(self) -> TheOddsClient:
        if self._theodds is None:
            s = self.settings
            self._theodds = TheOddsClient(
                api_key=s.odds_api_key,
                cache=self.cache,
                cache_ttl_seconds=s.cache.theodds_ttl_seconds,
                regions=s.regions,
                markets=s.markets,
                bookmakers=s.bookmakers,
                timeout=s.timeout_seconds,
                max_retries=s.max_retries,
            )
        return self._theodds

    @property
    def espn(self) -> EspnScoreboardClient:
        if self._espn is None:
            s = self.settings
            self._espn = EspnScoreboardClient(
                cache=self.cache,
                cache_ttl_seconds=s.cache.espn_ttl_seconds,
                timeout=s.timeout_seconds,
                max_retries=s.max_retries,
            )
        return self._espn

    def default_range(self) -> OddsRange:
        return OddsRange(self.settings.odds_range.low, self.settings.odds_range.high)

    def _resolve(self, sport: Optional[str], source: Optional[OddsSource | str]) -> tuple[OddsSource, str]:
        resolved = OddsSource(source) if source is not None else self.settings.source
        return resolved, sport or self.settings.sport or DEFAULT_SPORTS[resolved]

    async def get_events(
        self,
        sport: Optional[str] = None,
        source: Optional[OddsSource | str] = None,
        **params: Any,
    ) -> List[Event]:
        """Fetch and normalize events without range filtering.

        Events whose selected quote produced no priced lines are included
        with zero items.

        Raises:
            FetchError: the upstream request failed
            ValueError: unknown league, or ESPN-only params sent to The Odds API
        """
        resolved, sport_key = self._resolve(sport, source)
        if resolved == OddsSource.ESPN:
            league = resolve_league(sport_key)
            payload = await self.espn.fetch_scoreboard(league, **params)
            return map_scoreboard(payload, league, self.settings.preferred_soccer_provider_id)
        if params:
            raise ValueError(f"unsupported parameters for {resolved.value}: {sorted(params)}")
        payload = await self.theodds.fetch_odds(sport_key)
        # The Odds API has no ESPN provider ids; bookmakers are pre-selected by key
        return map_odds(payload)

    async def get_filtered_events(
        self,
        sport: Optional[str] = None,
        odds_range: Optional[OddsRange] = None,
        source: Optional[OddsSource | str] = None,
        **params: Any,
    ) -> List[Event]:
        """Events with only the line items inside ``odds_range``.

        Raises:
            FetchError: the upstream request failed
        """
        window = odds_range or self.default_range()
        events = await self.get_events(sport, source, **params)
        filtered = filter_events(events, window)
        bt.logging.debug(
            {
                "odds_filtered": {
                    "sport": sport,
                    "range": str(window),
                    "events_in": len(events),
                    "events_out": len(filtered),
                }
            }
        )
        return filtered

    async def get_board(
        self,
        sport: Optional[str] = None,
        odds_range: Optional[OddsRange] = None,
        sport_filter: Optional[str] = ALL_SPORTS,
        source: Optional[OddsSource | str] = None,
        **params: Any,
    ) -> OddsBoard:
        """Events narrowed by sport and odds range, with dropdown options and counts.

        ``total`` counts events that carried at least one line item before any
        filtering; events without any quote are never shown.
        """
        window = odds_range or self.default_range()
        events = [event for event in await self.get_events(sport, source, **params) if event.items]
        selected = filter_by_sport(events, sport_filter)
        return OddsBoard(
            events=filter_events(selected, window),
            total=len(events),
            sports=available_sports(events),
            odds_range=window,
            sport_filter=sport_filter or ALL_SPORTS,
        )

    async def close(self) -> None:
        for client in (self._theodds, self._espn):
            if client is not None:
                await client.close()

    async def __aenter__(self) -> "OddsService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["DEFAULT_SPORTS", "OddsBoard", "OddsService"]
