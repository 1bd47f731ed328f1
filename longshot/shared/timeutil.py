"""Event time helpers: ISO parsing and the Live/Today/Future display status."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

from longshot.shared.enums import GameStatusKind


@dataclass(frozen=True)
class GameStatus:
    kind: GameStatusKind
    label: str


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse ISO-8601 strings as sent by ESPN and The Odds API ("...Z", "...T19:00Z")."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        # ESPN omits seconds: 2026-10-18T17:00+00:00
        try:
            dt = datetime.strptime(text, "%Y-%m-%dT%H:%M%z")
        except ValueError:
            return None
    return ensure_utc(dt)


def format_time(dt: datetime) -> str:
    return dt.strftime("%I:%M %p").lstrip("0")


def format_datetime(dt: datetime) -> str:
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}, {format_time(dt)}"


def game_status(event_time: datetime, now: datetime, tz: Optional[tzinfo] = None) -> GameStatus:
    """Classify an event as Live, Today at <time>, or Future at <datetime>.

    The calendar-day comparison and the labels use ``tz``, defaulting to the
    zone of ``now`` (UTC when ``now`` is naive).
    """
    event_utc = ensure_utc(event_time)
    now_utc = ensure_utc(now)
    if event_utc < now_utc:
        return GameStatus(GameStatusKind.LIVE, "Live")

    zone = tz or now.tzinfo or timezone.utc
    local_event = event_utc.astimezone(zone)
    local_now = now_utc.astimezone(zone)
    if local_event.date() == local_now.date():
        return GameStatus(GameStatusKind.TODAY, f"Today at {format_time(local_event)}")
    return GameStatus(GameStatusKind.FUTURE, format_datetime(local_event))


__all__ = [
    "GameStatus",
    "ensure_utc",
    "parse_iso_datetime",
    "format_time",
    "format_datetime",
    "game_status",
]
