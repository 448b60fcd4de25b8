"""Logging service: Android `log` binary (logcat), plus an optional file copy."""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path

from adapters.shell import Runner, run_command
from core.config import AppSettings
from core.domain.models import LogLevel
from core.errors import CollaboratorError
from core.interfaces.collaborators import LogEmitter

PRIORITIES: dict[LogLevel, str] = {
    LogLevel.DEBUG: "d",
    LogLevel.INFO: "i",
    LogLevel.WARN: "w",
    LogLevel.ERROR: "e",
    LogLevel.FATAL: "f",
}


def format_file_line(level: LogLevel, tag: str, message: str, *, now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    return f"{stamp} {level.name:<5} [{tag}] {message}"


class LogcatEmitter(LogEmitter):
    def __init__(self, settings: AppSettings | None = None, *, runner: Runner = subprocess.run) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner

    def emit(self, level: LogLevel, tag: str, message: str) -> int:
        result = run_command(
            [self._settings.log_command, "-p", PRIORITIES[level], "-t", tag, "--", message],
            collaborator="logging service",
            settings=self._settings,
            runner=self._runner,
        )
        if result.returncode == 0 and self._settings.log_file is not None:
            self._append(self._settings.log_file, format_file_line(level, tag, message))
        return result.returncode

    @staticmethod
    def _append(path: Path, line: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            raise CollaboratorError("logging service", f"cannot write {path}: {exc.strerror or exc}") from exc
