"""Concrete Android collaborators.

Each module implements one `core.interfaces.collaborators` Protocol on top of
`adapters.shell.run_command`.
"""

from adapters.android.daemon import DaemonLauncher
from adapters.android.logcat import LogcatEmitter
from adapters.android.profiler import ProfileSettingsRunner
from adapters.android.properties import GetpropReader
from adapters.android.toast import NotificationToast

__all__ = [
	"DaemonLauncher",
	"GetpropReader",
	"LogcatEmitter",
	"NotificationToast",
	"ProfileSettingsRunner",
]
