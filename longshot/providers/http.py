"""Shared HTTP helper for upstream clients.

Maps every failure (non-2xx status, transport error, undecodable body) to
FetchError. Retries are opt-in (``max_retries``) and only apply to transport
errors, 429 and 5xx responses.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional, Tuple

import bittensor as bt
import httpx

from longshot.shared.errors import FetchError
from longshot.shared.logging import redact_secrets

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    source: str,
    params: Optional[Mapping[str, Any]] = None,
    max_retries: int = 0,
    backoff_seconds: float = 0.5,
) -> Tuple[Any, httpx.Headers]:
    """GET ``url`` and return (decoded JSON, response headers)."""
    attempt = 0
    backoff = backoff_seconds
    while True:
        try:
            resp = await client.get(url, params=params)
            resp.raise_for_status()
            try:
                return resp.json(), resp.headers
            except ValueError as exc:
                raise FetchError(source, "response body is not valid JSON", status=resp.status_code) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            body = exc.response.text[:200]
            bt.logging.warning({f"{source}_http_error": {"status": status, "url": redact_secrets(str(exc.request.url)), "body": body}})
            if status not in _RETRYABLE_STATUS or attempt >= max_retries:
                raise FetchError(source, body or exc.response.reason_phrase, status=status) from exc
        except httpx.RequestError as exc:
            bt.logging.warning({f"{source}_request_error": {"error": str(exc), "attempt": attempt}})
            if attempt >= max_retries:
                raise FetchError(source, str(exc) or exc.__class__.__name__) from exc
        await asyncio.sleep(backoff)
        attempt += 1
        backoff *= 2


__all__ = ["get_json"]
