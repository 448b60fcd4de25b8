"""Domain models (Pydantic v2).

Everything here is transient: built per invocation, discarded at exit.

Notes:
- Models describe *what* a request is, never *how* it is delivered.
- `ProfileSelection` and `LogRecord` only exist once every field is valid.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Command(str, Enum):
    """Commands recognised from the first token of an invocation."""

    RUN = "--run"
    PROFILE = "--profile"
    LOG = "--log"
    HELP = "help"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def resolve(cls, invocation: "Invocation") -> "Command":
        if invocation.argc < 2:
            return cls.HELP
        token = invocation.args[0]
        for command in (cls.RUN, cls.PROFILE, cls.LOG):
            if token == command.value:
                return command
        return cls.UNRECOGNIZED


class Profile(IntEnum):
    """Performance profiles applied by the profiler collaborator."""

    PERFORMANCE = 1
    BALANCED = 2
    ECO_MODE = 3

    @property
    def label(self) -> str:
        return _PROFILE_LABELS[self]

    @property
    def short_name(self) -> str:
        return _PROFILE_SHORT_NAMES[self]

    @classmethod
    def from_token(cls, token: str) -> "Profile | None":
        """Exact-string match against "1", "2", "3"; anything else is None."""

        for profile in cls:
            if token == str(profile.value):
                return profile
        return None

    @classmethod
    def legend(cls) -> list[str]:
        return [f"{p.value} = {p.short_name}" for p in cls]


_PROFILE_LABELS = {
    Profile.PERFORMANCE: "Performance Profile",
    Profile.BALANCED: "Balanced Profile",
    Profile.ECO_MODE: "Eco Mode",
}

_PROFILE_SHORT_NAMES = {
    Profile.PERFORMANCE: "Performance",
    Profile.BALANCED: "Balanced",
    Profile.ECO_MODE: "Eco Mode",
}


class LogLevel(IntEnum):
    """Severity accepted by the logging service."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @classmethod
    def legend(cls) -> str:
        return "Levels: " + ", ".join(f"{level.value}={level.name}" for level in cls)


class Invocation(BaseModel):
    """Ordered CLI tokens of one process run. Immutable once captured."""

    model_config = ConfigDict(frozen=True)

    program: str = Field(
        ...,
        min_length=1,
        description="Name the CLI was invoked as (argv[0]).",
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="Tokens after the program name, in original order.",
    )

    @classmethod
    def from_args(cls, program: str, args: Sequence[str]) -> "Invocation":
        return cls(program=program, args=tuple(args))

    @property
    def argc(self) -> int:
        """Classic argv count (program name included)."""

        return len(self.args) + 1


class ProfileSelection(BaseModel):
    """A validated manual profile choice."""

    model_config = ConfigDict(frozen=True)

    profile: Profile

    @property
    def log_message(self) -> str:
        return f"Applying {self.profile.label} via execute"

    @property
    def toast_message(self) -> str:
        return f"Applying {self.profile.label}"

    @property
    def confirmation(self) -> str:
        return self.toast_message


class LogRecord(BaseModel):
    """A log request ready to be forwarded to the logging service."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=1, description="Log tag (non-empty).")
    level: LogLevel = Field(..., description="Severity 0..4.")
    message: str = Field(default="", description="Message tokens joined by single spaces.")
