"""Server settings and the YAML loader consumed by ``hellomcp serve``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigError(Exception):
    """Raised when a settings file cannot be read, parsed or validated."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Settings for the bundled server.

    Every field has a default, so an empty file (or no file) gives the
    stock ``GreetingServer``.
    """

    name: str = Field(default="GreetingServer", min_length=1)
    version: str = "1.0.0"
    log_level: LogLevel = "WARNING"
    wrap_tool_results: bool = False
    source_path: str | None = None
    telemetry: TelemetrySettings | None = None


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ServerSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.

        Raises:
            ConfigError: On read errors, YAML parse errors or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Settings YAML must be a mapping")

        try:
            return ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_settings(path: str | Path | None = None) -> ServerSettings:
    """Load settings from *path*, or return the defaults when it is ``None``."""
    if path is None:
        return ServerSettings()
    return SettingsLoader(Path(path)).load()
