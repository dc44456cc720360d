"""Locate the tminus.toml to load.

Search order:
  1. ``TMINUS_CONFIG``. When set it is the only candidate; a path that does
     not exist means "no config".
  2. The working directory and its parents, so a project can pin its own
     shared countdown URL.
  3. The per-user file, ``$XDG_CONFIG_HOME/tminus/tminus.toml``
     (``~/.config/tminus/tminus.toml`` when the variable is unset).
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "tminus.toml"
CONFIG_ENV_VAR = "TMINUS_CONFIG"


def user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "tminus" / CONFIG_FILENAME


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """The config file for a run started in *start* (default: cwd), or None."""
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user_file = user_config_path()
    return user_file if user_file.is_file() else None
