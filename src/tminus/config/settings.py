"""TmSettings: CLI flags, ``TMINUS_*`` env vars and tminus.toml in one object.

Priority (highest first): CLI flags, env vars, the TOML file, then the
defaults baked into the section models. The file itself is parsed by
pydantic-settings' ``TomlConfigSettingsSource``; :meth:`TmSettings.from_cli`
decides which file that is for the current invocation.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
    TomlConfigSettingsSource,
)

from tminus.config.discovery import find_config
from tminus.config.models import ClockConfig, DisplayConfig, UrlConfig, ZonesConfig

# File chosen by from_cli, read while the settings object is being built.
_toml_file: ContextVar[Path | None] = ContextVar("tminus_toml_file", default=None)


class TmSettings(BaseSettings):
    """Settings shared by every command through ``AppContext``.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="TMINUS_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    clock: ClockConfig = Field(default_factory=ClockConfig)
    zones: ZonesConfig = Field(default_factory=ZonesConfig)
    url: UrlConfig = Field(default_factory=UrlConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> TmSettings:
        """Build settings for one CLI invocation.

        Loads *config_path* when given, otherwise whatever
        :func:`~tminus.config.discovery.find_config` finds from
        *search_root*. *cli_flags* override everything else.

        Raises:
            click.ClickException: *config_path* does not exist, or the
                configuration does not parse or validate.
        """
        if config_path:
            toml_file: Path | None = Path(config_path)
            if not toml_file.is_file():
                raise click.ClickException(f"Config file not found: {toml_file}")
        else:
            toml_file = find_config(search_root)

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        except SettingsError as exc:
            raise click.ClickException(f"Invalid settings: {exc}") from exc
        finally:
            _toml_file.reset(token)
