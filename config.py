"""
config.py — Visualizer Settings
================================
Every tunable number the engine and the web app consult lives here.

    from config import get_settings
    settings = get_settings()
    settings.max_delay_ms   # 700

Values can be overridden through environment variables named
SORTVIZ_<FIELD>, e.g. SORTVIZ_MAX_DELAY_MS=400 or SORTVIZ_DEBUG=false.
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "SORTVIZ_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    # speed slider range, and the delay it maps onto
    speed_min:     int   = 1
    speed_max:     int   = 100
    default_speed: int   = 50
    min_delay_ms:  int   = 20
    max_delay_ms:  int   = 700

    # array generation
    size_min:      int   = 5
    size_max:      int   = 100
    default_size:  int   = 30
    value_min:     int   = 10
    value_max:     int   = 389

    # web server
    host:          str   = "0.0.0.0"
    port:          int   = 5000
    debug:         bool  = False
    log_level:     str   = "INFO"

    def __post_init__(self):
        if self.speed_min <= 0 or self.speed_min > self.speed_max:
            raise ValueError(f"Invalid speed range [{self.speed_min}, {self.speed_max}]")
        if self.min_delay_ms < 0 or self.min_delay_ms > self.max_delay_ms:
            raise ValueError(f"Invalid delay range [{self.min_delay_ms}, {self.max_delay_ms}] ms")
        if self.size_min < 0 or self.size_min > self.size_max:
            raise ValueError(f"Invalid size range [{self.size_min}, {self.size_max}]")
        if self.value_min > self.value_max:
            raise ValueError(f"Invalid value range [{self.value_min}, {self.value_max}]")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings, letting SORTVIZ_* variables override the defaults."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            overrides[f.name] = _coerce(f.type, raw, f.name)
        return cls(**overrides)


def _coerce(kind, raw: str, name: str):
    if kind is bool:
        return raw.strip().lower() in _TRUTHY
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name.upper()}={raw!r} is not a valid {kind.__name__}") from None


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
