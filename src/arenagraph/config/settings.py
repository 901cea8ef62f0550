"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ARENAGRAPH_*`` prefix
  3. TOML file    — ``[graph]`` and ``[bench]`` tables of ``arenagraph.toml``
  4. Code defaults — baked into the section models

The TOML file is found with ``--config``, then ``ARENAGRAPH_CONFIG``, then by
walking up from the working directory. A path named explicitly must exist;
only walk-up discovery may come back empty.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from arenagraph.config.models import BenchConfig, GraphConfig

CONFIG_FILENAME = "arenagraph.toml"
CONFIG_ENV_VAR = "ARENAGRAPH_CONFIG"

# Tables a config file may contain, and the model each one must satisfy.
SECTIONS: dict[str, type[BaseModel]] = {"graph": GraphConfig, "bench": BenchConfig}

_toml_document: ContextVar[dict[str, Any] | None] = ContextVar("_toml_document", default=None)


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for this invocation.

    Raises:
        click.UsageError: If *explicit* or ``ARENAGRAPH_CONFIG`` names a
            file that does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            origin = "--config" if explicit else CONFIG_ENV_VAR
            raise click.UsageError(f"Config file not found ({origin}): {path}")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and check every table against its section model.

    Returns the raw tables so that env vars can still override single keys.

    Raises:
        click.ClickException: On invalid TOML, an unknown table, or a
            value its section model rejects.
    """
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    unknown = sorted(set(document) - set(SECTIONS))
    if unknown:
        expected = ", ".join(f"[{name}]" for name in SECTIONS)
        raise click.ClickException(
            f"Unknown key(s) {', '.join(unknown)} in {path}; expected only {expected}"
        )

    for name, table in document.items():
        if not isinstance(table, dict):
            raise click.ClickException(f"[{name}] in {path} must be a table")
        try:
            SECTIONS[name].model_validate(table)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise click.ClickException(f"Invalid [{name}] in {path}: {problems}") from exc
    return document


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the section tables of the active config file into settings."""

    def __init__(self, settings_cls: type[BaseSettings], document: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._document = document

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._document.get(field_name), field_name, True

    def __call__(self) -> dict[str, Any]:
        return {name: table for name, table in self._document.items() if name in SECTIONS}


class ArenaSettings(BaseSettings):
    """Unified settings for the arenagraph CLI and embedding applications.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ARENAGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    trace: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    bench: BenchConfig = Field(default_factory=BenchConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        document = _toml_document.get() or {}
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, document))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ArenaSettings:
        """Construct settings from a CLI invocation.

        CLI flags in *cli_flags* override env vars, which override the
        config file chosen by :func:`locate_config`.
        """
        path = locate_config(config_path, start)
        token = _toml_document.set(read_config(path) if path else None)
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _toml_document.reset(token)
