"""Command-line odds board.

Fetches one sport from the configured upstream, keeps only lines inside the
requested odds range, and prints the board as text or JSON.
"""

import argparse
import asyncio
import json
import os
import sys
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import bittensor as bt
from dotenv import load_dotenv

from longshot.config import Settings, load_settings, sanitize_dict
from longshot.lines.filters import ALL_SPORTS
from longshot.lines.types import Event, OddsRange
from longshot.service import OddsBoard, OddsService
from longshot.shared.enums import MARKET_LABELS, MarketKind, OddsSource
from longshot.shared.errors import FetchError
from longshot.shared.logging import configure_logging
from longshot.shared.price import format_price
from longshot.shared.timeutil import game_status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="longshot", description="Filter betting lines by odds range")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file")
    parser.add_argument("--source", choices=[s.value for s in OddsSource], default=None)
    parser.add_argument("--sport", type=str, default=None, help="Odds API sport slug or ESPN league code/path")
    parser.add_argument("--low", type=int, default=None, help="Lowest American odds to show")
    parser.add_argument("--high", type=int, default=None, help="Highest American odds to show")
    parser.add_argument("--sport-filter", type=str, default=ALL_SPORTS, help="Only show this sport key")
    parser.add_argument("--dates", type=str, default=None, help="ESPN only: YYYYMMDD or range")
    parser.add_argument("--week", type=int, default=None, help="ESPN only: week number")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--log-level", type=str.upper, choices=["TRACE", "DEBUG", "INFO", "WARNING"], default=None)
    return parser


def _display_zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        bt.logging.warning({"cli": {"unknown_timezone": name}})
        return timezone.utc


def event_to_dict(event: Event, now: datetime, tz: tzinfo) -> Dict[str, Any]:
    status = game_status(event.event_time, now, tz)
    return {
        "id": event.event_id,
        "sport_key": event.sport_key,
        "sport_title": event.sport_title,
        "title": event.title,
        "home_team": event.home_team,
        "away_team": event.away_team,
        "commence_time": event.event_time.isoformat(),
        "status": status.kind.value,
        "status_label": status.label,
        "provider": event.provider_name,
        "lines": [
            {
                "market": item.market.value,
                "side": item.side.value,
                "label": item.label,
                "price": item.price,
                "available": item.is_available,
                "display_price": format_price(item.price),
                "point": item.point,
            }
            for item in event.items
        ],
    }


def board_to_dict(board: OddsBoard, now: datetime, tz: tzinfo) -> Dict[str, Any]:
    return {
        "summary": board.summary,
        "odds_range": [board.odds_range.low, board.odds_range.high],
        "sport_filter": board.sport_filter,
        "sports": [{"key": s.key, "title": s.title} for s in board.sports],
        "events": [event_to_dict(e, now, tz) for e in board.events],
    }


def render_board(board: OddsBoard, now: datetime, tz: tzinfo) -> str:
    lines: List[str] = []
    if board.total == 0:
        return "No upcoming games available"
    if not board.events:
        return "No games match your filters\nTry adjusting your sport or odds range"
    lines.append(board.summary)
    for event in board.events:
        status = game_status(event.event_time, now, tz)
        provider = f"  ({event.provider_name})" if event.provider_name else ""
        lines.append("")
        lines.append(f"{event.title}  [{event.sport_title}]  {status.label}{provider}")
        for market in MarketKind:
            items = event.items_for(market)
            if not items:
                continue
            lines.append(f"  {MARKET_LABELS[market]}")
            for item in items:
                lines.append(f"    {item.label:<32} {format_price(item.price):>6}")
    return "\n".join(lines)


async def run(args: argparse.Namespace, settings: Settings, now: Optional[datetime] = None) -> str:
    odds_range = OddsRange(
        args.low if args.low is not None else settings.odds_range.low,
        args.high if args.high is not None else settings.odds_range.high,
    )
    params: Dict[str, Any] = {}
    if args.dates:
        params["dates"] = args.dates
    if args.week is not None:
        params["week"] = args.week

    async with OddsService(settings) as service:
        board = await service.get_board(
            args.sport,
            odds_range=odds_range,
            sport_filter=args.sport_filter,
            source=args.source,
            **params,
        )
    tz = _display_zone(settings.display_timezone)
    now = now or datetime.now(timezone.utc)
    if args.json:
        return json.dumps(board_to_dict(board, now, tz), indent=2)
    return render_board(board, now, tz)


def main(argv: Optional[List[str]] = None) -> int:
    # Load .env if not in test mode
    if os.environ.get("LONGSHOT_TEST_MODE") != "true":
        load_dotenv()

    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or settings.logging.level, redact=settings.logging.redact_secrets)
    bt.logging.debug({"cli_config": sanitize_dict(settings.model_dump(mode="json"))})

    try:
        output = asyncio.run(run(args, settings))
    except FetchError as exc:
        bt.logging.error({"cli_fetch_error": {"source": exc.source, "status": exc.status}})
        print(f"Error: failed to fetch odds data ({exc})", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
