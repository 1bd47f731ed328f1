"""Pick the single quote to display from a competition's provider list."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

from longshot.shared.enums import SportCategory

# ESPN BET. The default top-priority soccer provider frequently omits the draw.
PREFERRED_SOCCER_PROVIDER_ID = "58"


class Quote(Protocol):
    @property
    def provider_id(self) -> Optional[str]:
        ...


Q = TypeVar("Q", bound=Quote)


def select_quote(
    quotes: Sequence[Q],
    category: SportCategory,
    preferred_provider_id: Optional[str] = PREFERRED_SOCCER_PROVIDER_ID,
) -> Optional[Q]:
    """Return the quote to display, or None when there are no quotes.

    Upstream lists are already priority ordered, so the first quote wins,
    except for soccer where a quote from the preferred provider is taken from
    anywhere in the list.
    """
    if not quotes:
        return None
    if category == SportCategory.SOCCER and preferred_provider_id is not None:
        wanted = str(preferred_provider_id)
        for quote in quotes:
            if quote.provider_id is not None and str(quote.provider_id) == wanted:
                return quote
    return quotes[0]


__all__ = ["PREFERRED_SOCCER_PROVIDER_ID", "Quote", "select_quote"]
