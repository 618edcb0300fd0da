"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``CFURL_*`` prefix
  3. TOML file    - ``cfurl.toml`` discovered via walk-up
  4. Code defaults - baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cfurl.config.discovery import find_config
from cfurl.config.models import DashboardConfig, LauncherConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``cfurl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CfurlSettings(BaseSettings):
    """Settings for one cfurl invocation, frozen after construction.

    Stored on the :class:`~cfurl.commands._context.AppContext` at the CLI
    root and read by every service.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CFURL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_open: bool = False

    # --- TOML sections ---
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    launcher: LauncherConfig = Field(default_factory=LauncherConfig)

    @property
    def should_open(self) -> bool:
        """Whether resolved URLs are handed to the browser."""
        return self.launcher.open_browser and not self.no_open

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CfurlSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``cfurl.toml`` by walking up from *start* (default: cwd).
        CLI flags are merged as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
