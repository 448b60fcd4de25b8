"""Daemon start: spawn the long-running service detached from this process."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Callable

from core.config import AppSettings
from core.errors import CollaboratorError
from core.interfaces.collaborators import DaemonStarter

logger = logging.getLogger(__name__)


class DaemonLauncher(DaemonStarter):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        spawner: Callable[..., object] = subprocess.Popen,
    ) -> None:
        self._settings = settings or AppSettings()
        self._spawner = spawner

    def start(self) -> int:
        argv = shlex.split(self._settings.daemon_command)
        if not argv:
            raise CollaboratorError("daemon", "no daemon command configured")
        try:
            self._spawner(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise CollaboratorError("daemon", f"cannot start {argv[0]}: {exc.strerror or exc}") from exc
        logger.info("daemon started: %s", self._settings.daemon_command)
        return 0
