"""The-Odds-API client for raw per-sport odds.

Uses The-Odds-API (https://the-odds-api.com/). Each sport fetch counts as
one request against the monthly quota, so responses are cached per sport.

Requires API key via:
- ODDS_API_KEY (or LONGSHOT_ODDS_API_KEY) environment variable
- Or passed directly to constructor
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import bittensor as bt
import httpx

from longshot.providers.http import get_json
from longshot.shared.cache import CacheStore, TTLCache, make_cache_key
from longshot.shared.errors import FetchError

# The-Odds-API base URL
THEODDS_API_BASE = "https://api.the-odds-api.com/v4"

# Sport slug meaning "next games across all in-season sports"
UPCOMING = "upcoming"

DEFAULT_REGIONS = "us"
DEFAULT_MARKETS = "h2h,spreads,totals"
DEFAULT_BOOKMAKERS = "fanduel"

SOURCE = "theodds"


class TheOddsClient:
    """Fetches raw odds from The-Odds-API.

    Example:
        client = TheOddsClient(api_key="your_key")
        events = await client.fetch_odds("basketball_nba")
        print(client.requests_remaining)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        cache: Optional[CacheStore] = None,
        cache_ttl_seconds: float = 120,
        regions: str = DEFAULT_REGIONS,
        markets: str = DEFAULT_MARKETS,
        bookmakers: Optional[str] = DEFAULT_BOOKMAKERS,
        timeout: float = 10.0,
        max_retries: int = 0,
        base_url: str = THEODDS_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize The-Odds-API client.

        Args:
            api_key: API key (or uses ODDS_API_KEY / LONGSHOT_ODDS_API_KEY)
            cache: Store for raw payloads; a private TTLCache when omitted
            cache_ttl_seconds: How long a cached sport response stays fresh
            regions: Bookmaker regions (us, us2, uk, eu, au)
            markets: Comma-separated market keys
            bookmakers: Comma-separated bookmaker keys; None for all in region
            timeout: HTTP request timeout
            max_retries: Retries for transport errors, 429 and 5xx
            base_url: Override for the API root
            transport: Optional httpx transport (tests)
        """
        self.api_key = api_key or os.getenv("LONGSHOT_ODDS_API_KEY") or os.getenv("ODDS_API_KEY")
        if not self.api_key:
            raise ValueError(
                "API key not configured. "
                "Set ODDS_API_KEY or LONGSHOT_ODDS_API_KEY, or pass api_key."
            )
        self.cache_ttl_seconds = cache_ttl_seconds
        self.regions = regions
        self.markets = markets
        self.bookmakers = bookmakers
        self._cache: CacheStore = cache if cache is not None else TTLCache[Any](ttl_seconds=cache_ttl_seconds)
        self._timeout = timeout
        self._max_retries = max_retries
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        # Track API usage
        self._requests_remaining: Optional[int] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    def _params(self) -> Dict[str, str]:
        params = {
            "regions": self.regions,
            "markets": self.markets,
            "oddsFormat": "american",
            "dateFormat": "iso",
            "apiKey": self.api_key,
        }
        if self.bookmakers:
            params["bookmakers"] = self.bookmakers
        return params

    async def fetch_odds(self, sport: str = UPCOMING) -> List[Dict[str, Any]]:
        """Fetch raw odds for every event of a sport slug (cached).

        Raises:
            FetchError: non-2xx response, transport failure, or non-list body
        """
        cache_key = make_cache_key(
            SOURCE,
            sport,
            regions=self.regions,
            markets=self.markets,
            bookmakers=self.bookmakers,
        )
        cached = self._cache.get(cache_key, self.cache_ttl_seconds)
        if cached is not None:
            bt.logging.debug({"theodds_cache_hit": {"key": cache_key}})
            return cached

        url = f"{self._base_url}/sports/{sport}/odds/"
        bt.logging.info({"theodds_fetch": {"sport": sport, "bookmakers": self.bookmakers}})
        client = await self._get_client()
        payload, headers = await get_json(
            client,
            url,
            source=SOURCE,
            params=self._params(),
            max_retries=self._max_retries,
        )

        remaining = headers.get("x-requests-remaining")
        if remaining:
            try:
                self._requests_remaining = int(float(remaining))
            except ValueError:
                pass

        if not isinstance(payload, list):
            raise FetchError(SOURCE, f"unexpected odds payload type {type(payload).__name__}")
        self._cache.put(cache_key, payload)
        bt.logging.debug({"theodds_fetch_response": {"sport": sport, "event_count": len(payload), "requests_remaining": self._requests_remaining}})
        return payload

    @property
    def requests_remaining(self) -> Optional[int]:
        """Number of API requests remaining this month."""
        return self._requests_remaining

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "TheOddsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["THEODDS_API_BASE", "UPCOMING", "TheOddsClient"]
