"""PlainSettings — CLI flags, env vars, and plainspeak.toml in one object.

Priority chain (highest to lowest):
  1. Flags the user actually passed on the command line
  2. Env vars     — ``PLAINSPEAK_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``$PLAINSPEAK_CONFIG``, ``--config``, or the nearest
                    ``plainspeak.toml`` walking up from the CWD
  4. Code defaults — baked into :mod:`plainspeak.config.models`
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from plainspeak.config.models import DurationConfig, OutputConfig

CONFIG_FILENAME = "plainspeak.toml"
CONFIG_ENV_VAR = "PLAINSPEAK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the TOML file to load, or None.

    ``$PLAINSPEAK_CONFIG`` wins when set, even if it names a missing file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, a classmethod.
_tls = threading.local()


class PlainSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        duration: ``[duration]`` section; its precision is the default
            for ``plainspeak duration``.
        output: ``[output]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PLAINSPEAK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    duration: DurationConfig = Field(default_factory=DurationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> PlainSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored rather
        than falling back to discovery. Flags left at ``False``/``None``
        are dropped so env vars and TOML can still set them.

        Raises:
            click.ClickException: On malformed TOML or invalid values.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(search_root)

        overrides = {name: value for name, value in cli_flags.items() if value}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid settings from {source}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
