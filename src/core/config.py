"""Configuration of the converter.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Reads the project ``.env`` first, then the per-user config ``.env`` written
  by ``distconv config set``.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.direction import ConversionDirection

APP_DIR_NAME = "distance-converter"
ENV_PREFIX = "DISTCONV_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env. ``None`` values are skipped."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# distance-converter user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    A single typed contract for the CLI and the session; invalid values fail
    at the edge (env vars) with a ``ValidationError``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_direction: ConversionDirection = Field(
        default=ConversionDirection.KM_TO_MILES,
        description="Direction selected at startup (km-to-miles / miles-to-km).",
    )
    debounce_seconds: float = Field(
        default=0.5,
        ge=0,
        le=10,
        description="Quiet period before an input change triggers a conversion.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Stdlib logging level name for the CLI.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the banner in interactive modes.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(**overrides: object) -> AppSettings:
    """Build ``AppSettings``, resolving the user .env path at call time.

    Reads the project ``.env`` and then the user config ``.env`` (the later
    file wins). Environment variables beat both files and explicit
    ``overrides`` beat everything.
    """

    return AppSettings(_env_file=(".env", get_user_env_file()), **overrides)
