"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Adaptadores (getprop, notificaciones, log) y servicios leen la misma config.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory.

    On a rooted device HOME is usually unset or read-only, so
    `AZENITH_CONFIG_DIR` wins, then XDG, then `~/.config`.
    """

    override = (os.environ.get("AZENITH_CONFIG_DIR") or "").strip()
    if override:
        return Path(override)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "azenith"
    return Path.home() / ".config" / "azenith"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central CLI configuration.

    One typed contract for the router, the services and the Android adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZENITH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    program_name: str = Field(
        default="sys.azenith-service",
        min_length=1,
        description="Name shown in help text and usage lines.",
    )

    # Auto mode gate
    ai_mode_property: str = Field(
        default="persist.sys.azenithconf.AIenabled",
        min_length=1,
        description="System property holding the auto mode flag ('1' = active).",
    )
    profile_log_tag: str = Field(
        default="AZenith",
        min_length=1,
        description="Tag used for the record emitted when a profile is applied.",
    )

    # Collaborator binaries
    getprop_path: str = Field(default="/system/bin/getprop", min_length=1)
    profiler_command: str = Field(
        default="sys.azenith-profilesettings",
        min_length=1,
        description="Executable that applies a profile; receives the profile number.",
    )
    cmd_path: str = Field(default="/system/bin/cmd", min_length=1)
    toast_title: str = Field(default="AZenith", min_length=1)
    toast_as_shell_user: bool = Field(
        default=True,
        description="Post notifications as the shell uid (su -lp 2000).",
    )
    log_command: str = Field(
        default="/system/bin/log",
        min_length=1,
        description="Android `log` binary used as the logging service.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives every forwarded record.",
    )
    daemon_command: str = Field(
        default="sys.azenith-daemon",
        min_length=1,
        description="Command line that starts the long-running daemon.",
    )
    command_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per collaborator call (seconds).",
    )

    # Log forwarding
    max_message_bytes: int = Field(
        default=1023,
        ge=1,
        le=65536,
        description="Maximum UTF-8 size of a forwarded message.",
    )
    strict_log_level: bool = Field(
        default=True,
        description="Reject non-numeric level tokens instead of reading them as 0 (DEBUG).",
    )

    cli_log_level: str = Field(
        default="WARNING",
        description="Level for the CLI's own diagnostics (stdlib logging).",
    )
