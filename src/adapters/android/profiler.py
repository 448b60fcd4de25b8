"""Profiler collaborator: the AZenith profile settings executable."""

from __future__ import annotations

import subprocess

from adapters.shell import Runner, run_command
from core.config import AppSettings
from core.domain.models import Profile
from core.interfaces.collaborators import ProfilerRunner


class ProfileSettingsRunner(ProfilerRunner):
    def __init__(self, settings: AppSettings | None = None, *, runner: Runner = subprocess.run) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner

    def run(self, profile: Profile) -> int:
        result = run_command(
            [self._settings.profiler_command, str(int(profile))],
            collaborator="profiler",
            settings=self._settings,
            runner=self._runner,
        )
        return result.returncode
