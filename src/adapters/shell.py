"""Wrapper de subprocess.

- Estandariza timeouts, captura de salida y errores de todos los colaboradores.
- `runner` se puede sustituir por un stub en tests.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Sequence

from core.config import AppSettings
from core.errors import CollaboratorError

logger = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def run_command(
    argv: Sequence[str],
    *,
    collaborator: str,
    settings: AppSettings | None = None,
    runner: Runner = subprocess.run,
) -> subprocess.CompletedProcess[str]:
    """Run `argv` to completion and return the completed process.

    A non-zero exit is *not* an error here; callers decide what it means.
    Launch failures and timeouts become `CollaboratorError`.
    """

    settings = settings or AppSettings()
    logger.debug("exec %s", " ".join(argv))
    try:
        return runner(
            list(argv),
            capture_output=True,
            text=True,
            timeout=settings.command_timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CollaboratorError(
            collaborator, f"timed out after {settings.command_timeout_seconds:g}s"
        ) from exc
    except OSError as exc:
        raise CollaboratorError(collaborator, f"cannot execute {argv[0]}: {exc.strerror or exc}") from exc
