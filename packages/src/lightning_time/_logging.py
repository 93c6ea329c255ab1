"""Log formatting and root-logger configuration.

The ``lightning-time`` tool writes its results to stdout and its logs
to stderr, so piping ``lightning-time colors`` into another program
never mixes the two.

Two formats are supported:

- ``text`` — ``asctime [LEVEL] logger: message`` for terminals.
- ``json`` — one JSON object per line (NDJSON) with ``timestamp``
  (UTC, ISO 8601), ``level``, ``logger``, ``message``, ``service``
  and, when set, ``version``, ``exception`` and ``stack_info``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from lightning_time._settings import LoggingSettings

_BYTES_PER_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Args:
        service: Name included in every line as ``service``.
        version: Included as ``version`` when non-empty.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
    ) -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format *record* as one JSON line (tracebacks are escaped)."""
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }

        if self._version:
            entry["version"] = self._version

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
) -> None:
    """Replace the root logger's handlers according to *settings*.

    A stderr :class:`logging.StreamHandler` is always installed.  When
    ``settings.file`` is set a :class:`RotatingFileHandler` is added,
    rotating at ``settings.max_file_size_mb`` and keeping
    ``settings.backup_count`` files.
    """
    root = logging.getLogger()

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if settings.file is not None:
        file_handler = RotatingFileHandler(
            settings.file,
            maxBytes=settings.max_file_size_mb * _BYTES_PER_MB,
            backupCount=settings.backup_count,
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(settings.level)
