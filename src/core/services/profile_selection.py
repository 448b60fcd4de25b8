"""Manual profile selection (`--profile <1|2|3>`).

Flow: argument count -> auto mode gate -> exact token match -> log, toast,
profiler, confirmation. The auto mode property is read on every call and never
cached.
"""

from __future__ import annotations

import logging
from typing import Callable

from core.config import AppSettings
from core.domain.models import Invocation, LogLevel, Profile, ProfileSelection
from core.errors import AuthorizationError, CollaboratorError, UsageError, ValidationError
from core.interfaces.collaborators import (
    ConfigPropertyReader,
    LogEmitter,
    ProfilerRunner,
    ToastNotifier,
)

logger = logging.getLogger(__name__)

AUTO_MODE_ACTIVE = "1"


def profile_usage(program: str) -> list[str]:
    return [f"Usage: {program} --profile <1|2|3>", *Profile.legend()]


def parse_profile(token: str) -> ProfileSelection:
    profile = Profile.from_token(token)
    if profile is None:
        raise ValidationError(f"Invalid profile '{token}' (expected 1, 2 or 3).")
    return ProfileSelection(profile=profile)


class ProfileSelectionService:
    """Validates a manual profile choice and forwards it to the collaborators."""

    def __init__(
        self,
        *,
        properties: ConfigPropertyReader,
        logger_sink: LogEmitter,
        notifier: ToastNotifier,
        profiler: ProfilerRunner,
        settings: AppSettings | None = None,
        echo: Callable[[str], None] | None = None,
        report: Callable[[CollaboratorError], None] | None = None,
    ) -> None:
        self._properties = properties
        self._logger_sink = logger_sink
        self._notifier = notifier
        self._profiler = profiler
        self._settings = settings or AppSettings()
        self._echo = echo
        self._report = report

    def auto_mode_enabled(self) -> bool:
        value = self._properties.read(self._settings.ai_mode_property)
        return value == AUTO_MODE_ACTIVE

    def apply(self, invocation: Invocation) -> int:
        if invocation.argc < 3:
            raise UsageError("Missing profile number.", profile_usage(invocation.program))

        if self.auto_mode_enabled():
            raise AuthorizationError("Auto mode enabled. Manual profile blocked.")

        selection = parse_profile(invocation.args[1])
        logger.debug("manual profile selected: %s", selection.profile.name)

        # Fixed order: log, toast, profiler.
        ok = True
        ok &= self._call(
            "logging service",
            lambda: self._logger_sink.emit(
                LogLevel.INFO, self._settings.profile_log_tag, selection.log_message
            ),
        )
        ok &= self._call("toast", lambda: self._notifier.show(selection.toast_message))
        ok &= self._call("profiler", lambda: self._profiler.run(selection.profile))

        if self._echo:
            self._echo(selection.confirmation)
        return 0 if ok else 1

    def _call(self, name: str, action: Callable[[], int | None]) -> bool:
        """Run one collaborator call; failures are reported, never rolled back."""

        try:
            status = action()
            if status not in (None, 0):
                raise CollaboratorError.from_status(name, int(status))
        except CollaboratorError as exc:
            logger.debug("collaborator call failed: %s", exc.message)
            if self._report:
                self._report(exc)
            return False
        return True
