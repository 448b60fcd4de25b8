"""Contracts for the external collaborators.

- Structural contracts (Protocol): the Android adapters and the test fakes
  satisfy them without inheriting anything.
- All calls are synchronous; the core issues them one after another.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import LogLevel, Profile


@runtime_checkable
class ConfigPropertyReader(Protocol):
    """Read-only access to the process-wide property store."""

    def read(self, name: str) -> str:
        """Return the property value, or an empty string when unset."""

        ...


@runtime_checkable
class ProfilerRunner(Protocol):
    def run(self, profile: Profile) -> int:
        """Apply `profile`; returns the collaborator status (0 = ok)."""

        ...


@runtime_checkable
class ToastNotifier(Protocol):
    def show(self, message: str) -> None:
        ...


@runtime_checkable
class LogEmitter(Protocol):
    def emit(self, level: LogLevel, tag: str, message: str) -> int:
        """Forward one record to the logging service; returns its status."""

        ...


@runtime_checkable
class DaemonStarter(Protocol):
    def start(self) -> int:
        ...
