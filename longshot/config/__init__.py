from .core import (
    ODDS_RANGE_LIMIT,
    CacheSettings,
    LoggingSettings,
    OddsRangeSettings,
    Settings,
    load_settings,
    sanitize_dict,
)

__all__ = [
    "ODDS_RANGE_LIMIT",
    "CacheSettings",
    "LoggingSettings",
    "OddsRangeSettings",
    "Settings",
    "load_settings",
    "sanitize_dict",
]
