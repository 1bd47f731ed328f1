"""ESPN public scoreboard client.

Uses ESPN's public (unofficial) site API. No API key required. The odds
block of each competition is only present for upcoming and live games.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import bittensor as bt
import httpx

from longshot.providers.http import get_json
from longshot.shared.cache import CacheStore, TTLCache, make_cache_key
from longshot.shared.errors import FetchError

from .leagues import EspnLeague, resolve_league

# ESPN public API base URL
ESPN_API_BASE = "https://site.api.espn.com/apis/site/v2/sports"

SOURCE = "espn"


class EspnScoreboardClient:
    """Fetches raw scoreboards from ESPN's public API.

    Example:
        async with EspnScoreboardClient() as client:
            payload = await client.fetch_scoreboard("epl", dates="20261018")
    """

    def __init__(
        self,
        *,
        cache: Optional[CacheStore] = None,
        cache_ttl_seconds: float = 180,
        timeout: float = 10.0,
        max_retries: int = 0,
        base_url: str = ESPN_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize ESPN client.

        Args:
            cache: Store for raw payloads; a private TTLCache when omitted
            cache_ttl_seconds: How long a cached scoreboard stays fresh
            timeout: HTTP request timeout
            max_retries: Retries for transport errors, 429 and 5xx
            base_url: Override for the scoreboard API root
            transport: Optional httpx transport (tests)
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: CacheStore = cache if cache is not None else TTLCache[Any](ttl_seconds=cache_ttl_seconds)
        self._timeout = timeout
        self._max_retries = max_retries
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def fetch_scoreboard(
        self,
        league: EspnLeague | str,
        *,
        dates: Optional[str] = None,
        week: Optional[int] = None,
        season_type: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch the raw scoreboard for a league.

        Args:
            league: League, short code ("nfl") or path ("soccer/eng.1")
            dates: YYYYMMDD or YYYYMMDD-YYYYMMDD range
            week: Week number (football)
            season_type: 1 pre, 2 regular, 3 post

        Raises:
            FetchError: non-2xx response, transport failure, or non-object body
        """
        cfg = resolve_league(league)
        params = {"dates": dates, "week": week, "seasontype": season_type}
        query = {k: v for k, v in params.items() if v is not None}
        cache_key = make_cache_key(SOURCE, cfg.sport_path, **params)

        cached = self._cache.get(cache_key, self.cache_ttl_seconds)
        if cached is not None:
            bt.logging.debug({"espn_cache_hit": {"key": cache_key}})
            return cached

        url = f"{self._base_url}/{cfg.sport_path}/scoreboard"
        bt.logging.debug({"espn_scoreboard_request": {"league": cfg.code, "url": url, "params": query}})
        client = await self._get_client()
        payload, _ = await get_json(
            client,
            url,
            source=SOURCE,
            params=query or None,
            max_retries=self._max_retries,
        )
        if not isinstance(payload, dict):
            raise FetchError(SOURCE, f"unexpected scoreboard payload type {type(payload).__name__}")
        self._cache.put(cache_key, payload)
        bt.logging.debug({"espn_scoreboard_response": {"league": cfg.code, "event_count": len(payload.get("events") or [])}})
        return payload

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "EspnScoreboardClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["ESPN_API_BASE", "EspnScoreboardClient"]
