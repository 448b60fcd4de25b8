"""Shared fakes for the collaborator Protocols."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field

import pytest

from core.config import AppSettings
from core.domain.models import LogLevel, Profile
from core.errors import CollaboratorError
from core.services.command_router import Collaborators, CommandRouter, DispatchHooks


@dataclass
class CallLog:
    calls: list[tuple] = field(default_factory=list)

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakeProperties:
    def __init__(self, calls: CallLog, values: dict[str, str] | None = None) -> None:
        self.calls = calls
        self.values = values or {}

    def read(self, name: str) -> str:
        self.calls.calls.append(("read", name))
        return self.values.get(name, "")


class FakeProfiler:
    def __init__(self, calls: CallLog, status: int = 0) -> None:
        self.calls = calls
        self.status = status

    def run(self, profile: Profile) -> int:
        self.calls.calls.append(("profiler", profile))
        return self.status


class FakeToast:
    def __init__(self, calls: CallLog, fail: bool = False) -> None:
        self.calls = calls
        self.fail = fail

    def show(self, message: str) -> None:
        self.calls.calls.append(("toast", message))
        if self.fail:
            raise CollaboratorError("toast", "exit status 1", status=1)


class FakeLogSink:
    def __init__(self, calls: CallLog, status: int = 0) -> None:
        self.calls = calls
        self.status = status

    def emit(self, level: LogLevel, tag: str, message: str) -> int:
        self.calls.calls.append(("log", level, tag, message))
        return self.status


class FakeDaemon:
    def __init__(self, calls: CallLog, status: int = 0) -> None:
        self.calls = calls
        self.status = status

    def start(self) -> int:
        self.calls.calls.append(("daemon",))
        return self.status


@dataclass
class Output:
    stdout: list[str] = field(default_factory=list)
    errors: list[tuple[str, list[str]]] = field(default_factory=list)
    help_shown: int = 0


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def calls() -> CallLog:
    return CallLog()


@pytest.fixture
def collaborators(calls: CallLog) -> Collaborators:
    return Collaborators(
        properties=FakeProperties(calls),
        profiler=FakeProfiler(calls),
        notifier=FakeToast(calls),
        log_sink=FakeLogSink(calls),
        daemon=FakeDaemon(calls),
    )


@pytest.fixture
def output() -> Output:
    return Output()


@pytest.fixture
def router(collaborators: Collaborators, settings: AppSettings, output: Output) -> CommandRouter:
    def show_help() -> None:
        output.help_shown += 1

    hooks = DispatchHooks(
        echo=output.stdout.append,
        error=lambda message, usage: output.errors.append((message, usage)),
        show_help=show_help,
    )
    return CommandRouter(collaborators, settings=settings, hooks=hooks)


class FakeRunner:
    """Stands in for `subprocess.run`; records argv and returns a canned result."""

    def __init__(self, returncode: int = 0, stdout: str = "", exc: Exception | None = None) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.exc = exc
        self.argv: list[list[str]] = []
        self.kwargs: list[dict] = []

    def __call__(self, argv, **kwargs):
        self.argv.append(argv)
        self.kwargs.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(argv, self.returncode, stdout=self.stdout, stderr="")
