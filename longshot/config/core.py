from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from longshot.lines.types import ODDS_RANGE_LIMIT
from longshot.shared.enums import OddsSource

_SECRET_MARKERS = ("key", "secret", "token", "password")


class CacheSettings(BaseModel):
    theodds_ttl_seconds: float = 120.0
    espn_ttl_seconds: float = 180.0

    @model_validator(mode="after")
    def _validate_ttls(self) -> "CacheSettings":
        for field_name in ("theodds_ttl_seconds", "espn_ttl_seconds"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be >= 0")
        return self


class OddsRangeSettings(BaseModel):
    low: int = -1000
    high: int = 1000

    @model_validator(mode="after")
    def _validate_bounds(self) -> "OddsRangeSettings":
        if self.low > self.high:
            raise ValueError("odds_range.low must be <= odds_range.high")
        if self.low < -ODDS_RANGE_LIMIT or self.high > ODDS_RANGE_LIMIT:
            raise ValueError(f"odds_range must lie within [-{ODDS_RANGE_LIMIT}, {ODDS_RANGE_LIMIT}]")
        return self


class LoggingSettings(BaseModel):
    level: str = "INFO"
    redact_secrets: bool = True

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("TRACE", "DEBUG", "INFO", "WARNING"):
            raise ValueError(f"unsupported log level: {value}")
        return level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LONGSHOT_",
        env_nested_delimiter="__",
        populate_by_name=True,
        extra="ignore",
    )

    source: OddsSource = OddsSource.THE_ODDS_API
    # None picks the per-source default (Odds API "upcoming", ESPN "nfl")
    sport: Optional[str] = None

    # The Odds API
    odds_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("odds_api_key", "LONGSHOT_ODDS_API_KEY", "ODDS_API_KEY"),
    )
    regions: str = "us"
    markets: str = "h2h,spreads,totals"
    bookmakers: Optional[str] = "fanduel"

    # HTTP
    timeout_seconds: float = 10.0
    max_retries: int = 0

    # ESPN BET; the top-priority soccer provider often omits the draw
    preferred_soccer_provider_id: str = "58"
    display_timezone: str = "UTC"

    cache: CacheSettings = Field(default_factory=CacheSettings)
    odds_range: OddsRangeSettings = Field(default_factory=OddsRangeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("bookmakers")
    @classmethod
    def _empty_bookmakers(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("max_retries")
    @classmethod
    def _non_negative_retries(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_retries must be >= 0")
        return value


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    section = data.get("longshot", data)
    return dict(section) if isinstance(section, dict) else {}


def load_settings(yaml_path: Optional[str] = None, **overrides: Any) -> Settings:
    """Build Settings from environment, an optional YAML file, and overrides.

    YAML values (optionally nested under a top-level ``longshot:`` key) override
    the environment; keyword overrides win over both.
    """
    data: Dict[str, Any] = {}
    if yaml_path:
        path = Path(yaml_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"config file not found: {path}")
        data.update(_read_yaml(path))
    data.update(overrides)
    return Settings(**data)


def sanitize_dict(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of ``data`` with secret-looking values masked, safe for logging."""
    out: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            out[key] = sanitize_dict(value)
        elif value and any(marker in str(key).lower() for marker in _SECRET_MARKERS):
            out[key] = "***"
        else:
            out[key] = value
    return out
