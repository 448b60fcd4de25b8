"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shlex
import shutil

import typer
from rich.console import Console

from adapters.android import GetpropReader
from cli.ui_components import build_doctor_table, print_help
from core.config import AppSettings, get_user_env_file
from core.errors import CollaboratorError
from core.services.profile_selection import AUTO_MODE_ACTIVE

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(command: str) -> tuple[bool, str]:
    argv = shlex.split(command)
    if not argv:
        return False, "not configured"
    found = shutil.which(argv[0])
    if found:
        return True, found
    return False, f"{argv[0]} not found on PATH"


def _check_auto_mode(settings: AppSettings) -> tuple[str, str]:
    try:
        value = GetpropReader(settings).read(settings.ai_mode_property)
    except CollaboratorError as exc:
        return "FAIL", exc.message
    if value == AUTO_MODE_ACTIVE:
        return "ACTIVE", "Manual --profile is blocked"
    return "OFF", f"{settings.ai_mode_property}={value or '<unset>'}"


@app.command()
def run() -> None:
    """Show the resolved configuration and check every collaborator."""

    settings = AppSettings()

    table = build_doctor_table()

    binaries = {
        "getprop": settings.getprop_path,
        "Profiler": settings.profiler_command,
        "Notifications (cmd)": settings.cmd_path,
        "Logging service": settings.log_command,
        "Daemon": settings.daemon_command,
    }
    for label, command in binaries.items():
        ok, detail = _check_binary(command)
        table.add_row(label, "OK" if ok else "MISSING", detail)

    status, detail = _check_auto_mode(settings)
    table.add_row("Auto mode", status, detail)

    table.add_row("Max message", "OK", f"{settings.max_message_bytes} bytes")
    table.add_row(
        "Level parsing",
        "OK",
        "strict" if settings.strict_log_level else "lenient (non-numeric -> DEBUG)",
    )
    table.add_row("Log file", "OK" if settings.log_file else "OPTIONAL", str(settings.log_file or "-"))
    table.add_row("User config", "OK", str(get_user_env_file()))

    _console.print(table)


@app.command(name="show-help")
def show_help() -> None:
    """Print the service CLI help text exactly as operators see it."""

    print_help(_console, AppSettings().program_name)
