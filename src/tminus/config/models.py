"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tminus.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    tick_interval_ms: int = Field(default=100, ge=1)


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    default_zone: str = ""  # used by ``add`` when --zone is omitted
    detect_local: bool = True


class UrlConfig(BaseModel):
    """[url] section."""

    model_config = {"frozen": True}

    base: str = ""  # prefix for URLs built from scratch


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_seconds: bool = True
    show_local_time: bool = True

