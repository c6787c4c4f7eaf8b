"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client, resource client) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "cine-list"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "cine-list"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "cine-list"
    return Path.home() / ".config" / "cine-list"


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


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# cine-list user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking logic into the Core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CINE_LIST_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:8081",
        min_length=8,
        description="Base URL of the Cine-List backend.",
    )
    app_origin: str = Field(
        default="http://localhost:8081",
        min_length=8,
        description="Origin the web app is served from (relative endpoints resolve here).",
    )
    reset_password_relative: bool = Field(
        default=True,
        description=(
            "Address reset-password relative to `app_origin` instead of `api_base_url`. "
            "Pending product-owner confirmation."
        ),
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow redirects like browser fetch does. When off, 3xx is a failure.",
    )
    user_agent: str = Field(
        default="cine-list-client/0.1",
        min_length=1,
        description="User-Agent header for backend requests.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )
