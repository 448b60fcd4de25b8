"""Log forwarding (`--log <TAG> <LEVEL> <MESSAGE...>`)."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from core.config import AppSettings
from core.domain.models import Invocation, LogLevel, LogRecord
from core.errors import CapacityError, CollaboratorError, UsageError, ValidationError
from core.interfaces.collaborators import LogEmitter

logger = logging.getLogger(__name__)

LOG_USAGE = "Usage: --log <TAG> <LEVEL> <MESSAGE>"

_STRICT_INT = re.compile(r"[+-]?[0-9]+")
_ATOI_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_level(token: str, *, strict: bool = True) -> LogLevel:
    """Turn the level token into a `LogLevel`.

    strict: the token must be an integer literal.
    lenient: C `atoi` reading (leading digits only; no digits gives 0/DEBUG).
    """

    if strict:
        if not _STRICT_INT.fullmatch(token):
            raise ValidationError("Invalid log level (0..4)")
        value = int(token)
    else:
        match = _ATOI_PREFIX.match(token)
        value = int(match.group(1)) if match else 0

    if value < LogLevel.DEBUG or value > LogLevel.FATAL:
        raise ValidationError("Invalid log level (0..4)")
    return LogLevel(value)


def assemble_message(tokens: Sequence[str], *, max_bytes: int) -> str:
    """Join tokens with single spaces; fail closed above `max_bytes` (UTF-8)."""

    message = " ".join(tokens)
    size = len(message.encode("utf-8"))
    if size > max_bytes:
        raise CapacityError(f"Log message too long ({size} bytes, max {max_bytes}).")
    return message


class LogForwardingService:
    def __init__(self, *, sink: LogEmitter, settings: AppSettings | None = None) -> None:
        self._sink = sink
        self._settings = settings or AppSettings()

    def build_record(self, invocation: Invocation) -> LogRecord:
        if invocation.argc < 5:
            raise UsageError("Missing log arguments.", [LOG_USAGE, LogLevel.legend()])

        tag = invocation.args[1]
        if not tag:
            raise ValidationError("Invalid log tag (must not be empty)")

        level = parse_level(invocation.args[2], strict=self._settings.strict_log_level)
        message = assemble_message(
            invocation.args[3:], max_bytes=self._settings.max_message_bytes
        )
        return LogRecord(tag=tag, level=level, message=message)

    def forward(self, invocation: Invocation) -> int:
        record = self.build_record(invocation)
        logger.debug("forwarding %s record tagged %s", record.level.name, record.tag)

        status = self._sink.emit(record.level, record.tag, record.message)
        if status != 0:
            raise CollaboratorError.from_status("logging service", status)
        return 0
