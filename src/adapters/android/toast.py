"""Toasts via `cmd notification post`.

Notes:
- Root cannot post notifications on recent Android releases, so by default the
  command runs as the shell uid (`su -lp 2000 -c ...`).
"""

from __future__ import annotations

import shlex
import subprocess

from adapters.shell import Runner, run_command
from core.config import AppSettings
from core.errors import CollaboratorError
from core.interfaces.collaborators import ToastNotifier

NOTIFICATION_TAG = "azenith_toast"


class NotificationToast(ToastNotifier):
    def __init__(self, settings: AppSettings | None = None, *, runner: Runner = subprocess.run) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner

    def build_argv(self, message: str) -> list[str]:
        post = [
            self._settings.cmd_path,
            "notification",
            "post",
            "-S",
            "bigtext",
            "-t",
            self._settings.toast_title,
            NOTIFICATION_TAG,
            message,
        ]
        if not self._settings.toast_as_shell_user:
            return post
        return ["su", "-lp", "2000", "-c", shlex.join(post)]

    def show(self, message: str) -> None:
        result = run_command(
            self.build_argv(message),
            collaborator="toast",
            settings=self._settings,
            runner=self._runner,
        )
        if result.returncode != 0:
            raise CollaboratorError.from_status("toast", result.returncode)
