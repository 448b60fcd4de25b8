"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan los adaptadores concretos.
- El Core depende de abstracciones, nunca de subprocess.
"""

from core.interfaces.collaborators import (
    ConfigPropertyReader,
    DaemonStarter,
    LogEmitter,
    ProfilerRunner,
    ToastNotifier,
)

__all__ = [
    "ConfigPropertyReader",
    "DaemonStarter",
    "LogEmitter",
    "ProfilerRunner",
    "ToastNotifier",
]
