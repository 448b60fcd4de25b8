"""CLI UI components (Rich).

- Help text, error lines and confirmations live here, not in the commands.
- The help text is part of the CLI contract: operators grep it, so it is
  printed without markup or wrapping.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import LogLevel, Profile


def build_help_text(program: str) -> str:
    lines = [
        "AZenith Daemon CLI by @Zexshia",
        "Usage:",
        f"  {program} --run",
        "      Start AZenith daemon",
        "",
        f"  {program} --profile <1|2|3>",
        "      Apply AZenith Profile manually",
        *(f"      {entry}" for entry in Profile.legend()),
        "",
        f"  {program} --log <TAG> <LEVEL> <MESSAGE>",
        "      Write log through AZenith logging service",
        "      Usage: --log <TAG> <LEVEL> <MESSAGE>",
        f"      {LogLevel.legend()}",
    ]
    return "\n".join(lines)


def print_help(console: Console, program: str) -> None:
    console.print(build_help_text(program), markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_line(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(console: Console, message: str, usage: list[str] | None = None) -> None:
    """Single-line diagnostic, followed by the syntax reminder for usage errors."""

    line = Text.assemble(("ERROR:", "bold red"), " ", message)
    console.print(line, highlight=False, soft_wrap=True)
    for usage_line in usage or []:
        console.print(usage_line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="AZenith Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
