"""Error taxonomy of the service CLI.

Rules:
- Services and adapters raise these; the router catches `AzenithError` once,
  reports it and turns it into a process exit status.
- No error is retried. Every error ends the invocation (except collaborator
  failures inside the profile chain, which are reported and skipped).
"""

from __future__ import annotations

from typing import Sequence


class AzenithError(Exception):
    """Base class; `exit_code` is what the process returns."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(AzenithError):
    """Wrong argument count/shape. Carries the syntax reminder lines."""

    def __init__(self, message: str, usage: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.usage = list(usage)


class AuthorizationError(AzenithError):
    """Auto mode owns profile selection."""


class ValidationError(AzenithError):
    """Bad enum value, bad level or malformed token."""


class CapacityError(AzenithError):
    """Message exceeds the configured maximum length."""


class CollaboratorError(AzenithError):
    """An external collaborator reported failure (passed through as-is)."""

    def __init__(self, collaborator: str, detail: str, *, status: int | None = None) -> None:
        super().__init__(f"{collaborator} failed: {detail}")
        self.collaborator = collaborator
        self.status = status

    @classmethod
    def from_status(cls, collaborator: str, status: int) -> "CollaboratorError":
        return cls(collaborator, f"exit status {status}", status=status)
