"""Exception hierarchy shared by the fetch layer and the odds engine."""

from __future__ import annotations

from typing import Optional


class LongshotError(Exception):
    """Base class for all longshot errors."""


class PriceParseError(LongshotError, ValueError):
    """A price value could not be read as American odds."""

    def __init__(self, value: object) -> None:
        super().__init__(f"malformed price: {value!r}")
        self.value = value


class FetchError(LongshotError):
    """Upstream returned a non-success status or the request failed."""

    def __init__(self, source: str, message: str, status: Optional[int] = None) -> None:
        detail = f"{source}: {message}"
        if status is not None:
            detail = f"{source}: HTTP {status}: {message}"
        super().__init__(detail)
        self.source = source
        self.status = status
        self.message = message


class SchemaMismatch(LongshotError):
    """An upstream payload is missing a field the normalizer needs."""


__all__ = ["LongshotError", "PriceParseError", "FetchError", "SchemaMismatch"]
