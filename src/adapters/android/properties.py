"""Property store access through Android's `getprop`."""

from __future__ import annotations

import subprocess

from adapters.shell import Runner, run_command
from core.config import AppSettings
from core.errors import CollaboratorError
from core.interfaces.collaborators import ConfigPropertyReader


class GetpropReader(ConfigPropertyReader):
    """Reads one system property per call; nothing is cached."""

    def __init__(self, settings: AppSettings | None = None, *, runner: Runner = subprocess.run) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner

    def read(self, name: str) -> str:
        result = run_command(
            [self._settings.getprop_path, name],
            collaborator="property store",
            settings=self._settings,
            runner=self._runner,
        )
        if result.returncode != 0:
            raise CollaboratorError.from_status("property store", result.returncode)
        return (result.stdout or "").strip()
