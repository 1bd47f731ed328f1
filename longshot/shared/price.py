"""American odds price parsing and formatting.

Upstreams mix encodings for the same field: plain integers, signed strings
("+150", "-110"), thousand separators ("1,200") and sentinels:

- "OFF"  → line not currently offered (Unavailable, returned as None)
- "EVEN" → even money, 0

Unavailable must never be confused with a real price of 0.
"""

from __future__ import annotations

from typing import Optional, Union

import bittensor as bt

from longshot.shared.errors import PriceParseError

RawPrice = Union[int, float, str, None]

OFF_SENTINEL = "OFF"
EVEN_SENTINEL = "EVEN"


def parse_price_strict(value: RawPrice) -> Optional[int]:
    """Parse a raw price, raising PriceParseError on malformed input.

    Returns None for "OFF" and for an absent (None) value.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise PriceParseError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise PriceParseError(value)
        return int(value)
    if not isinstance(value, str):
        raise PriceParseError(value)

    text = value.strip()
    upper = text.upper()
    if upper == OFF_SENTINEL:
        return None
    if upper == EVEN_SENTINEL:
        return 0
    if text.startswith("+"):
        text = text[1:]
        if text.startswith(("+", "-")):
            raise PriceParseError(value)
    text = text.replace(",", "")
    # int() would also accept "1_000", surrounding whitespace and non-ASCII digits
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise PriceParseError(value)
    try:
        return int(text, 10)
    except ValueError as exc:
        raise PriceParseError(value) from exc


def parse_price(value: RawPrice) -> Optional[int]:
    """Parse a raw price; malformed values are demoted to None (Unavailable)."""
    try:
        return parse_price_strict(value)
    except PriceParseError as exc:
        bt.logging.debug({"price_parse_error": {"value": repr(exc.value)}})
        return None


def format_price(price: Optional[int]) -> str:
    """Render American odds for display: +150, -110, EVEN, OFF."""
    if price is None:
        return OFF_SENTINEL
    if price == 0:
        return EVEN_SENTINEL
    if price > 0:
        return f"+{price}"
    return str(price)


def format_point(point: float) -> str:
    """Render a spread line with an explicit sign: +3.5, -7, 0."""
    value = float(point)
    text = f"{value:g}"
    if value > 0:
        return f"+{text}"
    if value == 0:
        return "0"
    return text


__all__ = [
    "RawPrice",
    "OFF_SENTINEL",
    "EVEN_SENTINEL",
    "parse_price",
    "parse_price_strict",
    "format_price",
    "format_point",
]
