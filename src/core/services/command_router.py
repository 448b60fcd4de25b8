"""Command routing for the service CLI.

The router picks a handler from the first token, runs it and turns every
`AzenithError` into an exit status. Printing stays in the UI layer: the router
only talks to it through `DispatchHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.config import AppSettings
from core.domain.models import Command, Invocation
from core.errors import AzenithError, CollaboratorError, UsageError
from core.interfaces.collaborators import (
    ConfigPropertyReader,
    DaemonStarter,
    LogEmitter,
    ProfilerRunner,
    ToastNotifier,
)
from core.services.log_forwarding import LogForwardingService
from core.services.profile_selection import ProfileSelectionService

logger = logging.getLogger(__name__)


@dataclass
class Collaborators:
    """External subsystems the CLI forwards to."""

    properties: ConfigPropertyReader
    profiler: ProfilerRunner
    notifier: ToastNotifier
    log_sink: LogEmitter
    daemon: DaemonStarter


@dataclass
class DispatchHooks:
    """Optional callbacks for the UI layer (stdout, stderr, help)."""

    echo: Callable[[str], None] | None = None
    error: Callable[[str, list[str]], None] | None = None
    show_help: Callable[[], None] | None = None


class CommandRouter:
    def __init__(
        self,
        collaborators: Collaborators,
        settings: AppSettings | None = None,
        hooks: DispatchHooks | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._settings = settings or AppSettings()
        self._hooks = hooks or DispatchHooks()

        self.profiles = ProfileSelectionService(
            properties=collaborators.properties,
            logger_sink=collaborators.log_sink,
            notifier=collaborators.notifier,
            profiler=collaborators.profiler,
            settings=self._settings,
            echo=self._hooks.echo,
            report=self.report,
        )
        self.logs = LogForwardingService(sink=collaborators.log_sink, settings=self._settings)

    def dispatch(self, invocation: Invocation) -> int:
        command = Command.resolve(invocation)
        logger.debug("dispatching %s (argc=%d)", command.name, invocation.argc)

        if command in (Command.HELP, Command.UNRECOGNIZED):
            if self._hooks.show_help:
                self._hooks.show_help()
            return 1

        try:
            if command is Command.RUN:
                return self._collaborators.daemon.start()
            if command is Command.PROFILE:
                return self.profiles.apply(invocation)
            return self.logs.forward(invocation)
        except AzenithError as exc:
            self.report(exc)
            return exc.exit_code

    def report(self, exc: AzenithError) -> None:
        usage = exc.usage if isinstance(exc, UsageError) else []
        if isinstance(exc, CollaboratorError):
            logger.info("collaborator error from %s (status=%s)", exc.collaborator, exc.status)
        if self._hooks.error:
            self._hooks.error(exc.message, usage)
