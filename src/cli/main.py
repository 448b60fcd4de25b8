"""Entry point `sys.azenith-service`.

The commands are flag tokens (`--run`, `--profile`, `--log`) followed by raw
arguments, so Typer hands every token through untouched and the router does
the parsing.
"""

from __future__ import annotations

import sys
from typing import Sequence

import typer
from rich.console import Console

from adapters.android import (
    DaemonLauncher,
    GetpropReader,
    LogcatEmitter,
    NotificationToast,
    ProfileSettingsRunner,
)
from cli.logging_setup import configure_logging
from cli.ui_components import print_error, print_help, print_line
from core.config import AppSettings
from core.domain.models import Invocation
from core.services.command_router import Collaborators, CommandRouter, DispatchHooks

app = typer.Typer(add_completion=False)

_console = Console()
_err_console = Console(stderr=True)


def build_collaborators(settings: AppSettings) -> Collaborators:
    return Collaborators(
        properties=GetpropReader(settings),
        profiler=ProfileSettingsRunner(settings),
        notifier=NotificationToast(settings),
        log_sink=LogcatEmitter(settings),
        daemon=DaemonLauncher(settings),
    )


def build_router(settings: AppSettings) -> CommandRouter:
    hooks = DispatchHooks(
        echo=lambda text: print_line(_console, text),
        error=lambda message, usage: print_error(_err_console, message, usage),
        show_help=lambda: print_help(_console, settings.program_name),
    )
    return CommandRouter(build_collaborators(settings), settings=settings, hooks=hooks)


@app.command(
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(ctx: typer.Context) -> None:
    """AZenith Daemon CLI."""

    settings = AppSettings()
    configure_logging(settings.cli_log_level)

    invocation = Invocation.from_args(settings.program_name, ctx.args)
    status = build_router(settings).dispatch(invocation)
    raise typer.Exit(code=status)


def passthrough_args(argv: Sequence[str]) -> list[str]:
    """Lead with `--` so Click keeps every later token, `--` included, in `ctx.args`."""

    return ["--", *argv]


def run(argv: Sequence[str] | None = None) -> None:
    tokens = sys.argv[1:] if argv is None else argv
    app(args=passthrough_args(tokens))
