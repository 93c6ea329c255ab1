"""Unit tests for lightning_time._logging — formatter and configuration.

Test Techniques Used:
    - Specification-based Testing: JsonFormatter output schema
    - State Inspection: Root logger handler/level after configure
    - Fixture Isolation: Save/restore root logger state
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from lightning_time._logging import JsonFormatter, configure_logging
from lightning_time._settings import LoggingSettings


@pytest.fixture
def _restore_root_logger() -> Iterator[None]:
    """Save and restore root logger handlers and level."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for h in root.handlers:
        if h not in original_handlers:
            h.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


def _make_record(message: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="lightning_time.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestJsonFormatter:
    """JsonFormatter output schema.

    Technique: Specification-based Testing.
    """

    def test_has_required_fields(self) -> None:
        result = json.loads(JsonFormatter(service="svc").format(_make_record()))
        assert {"timestamp", "level", "logger", "message", "service"} <= result.keys()
        assert result["message"] == "hello"
        assert result["logger"] == "lightning_time.test"
        assert result["level"] == "INFO"

    def test_timestamp_is_utc_iso8601(self) -> None:
        result = json.loads(JsonFormatter(service="svc").format(_make_record()))
        assert datetime.fromisoformat(result["timestamp"]).tzinfo == UTC

    def test_version_included_when_set(self) -> None:
        fmt = JsonFormatter(service="svc", version="1.2.3")
        assert json.loads(fmt.format(_make_record()))["version"] == "1.2.3"

    def test_version_omitted_when_empty(self) -> None:
        fmt = JsonFormatter(service="svc")
        assert "version" not in json.loads(fmt.format(_make_record()))

    def test_exception_included_when_present(self) -> None:
        record = _make_record()
        record.exc_info = (ValueError, ValueError("boom"), None)
        result = json.loads(JsonFormatter(service="svc").format(record))
        assert "ValueError" in result["exception"]

    def test_output_is_single_line(self) -> None:
        record = _make_record("line one\nline two")
        assert "\n" not in JsonFormatter(service="svc").format(record)


@pytest.mark.usefixtures("_restore_root_logger")
class TestConfigureLogging:
    """Root logger setup.

    Technique: State Inspection.
    """

    def test_json_mode_sets_json_formatter(self) -> None:
        configure_logging(LoggingSettings(format="json"), service="test")
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_text_mode_sets_standard_formatter(self) -> None:
        configure_logging(LoggingSettings(format="text"), service="test")
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, logging.Formatter)
        assert not isinstance(formatter, JsonFormatter)

    def test_sets_root_logger_level(self) -> None:
        configure_logging(LoggingSettings(level="DEBUG"), service="test")
        assert logging.getLogger().level == logging.DEBUG

    def test_clears_existing_handlers(self) -> None:
        root = logging.getLogger()
        dummy = logging.StreamHandler()
        root.addHandler(dummy)

        configure_logging(LoggingSettings(), service="test")

        assert dummy not in root.handlers
        assert len(root.handlers) == 1

    def test_file_handler_uses_configured_rotation(self, tmp_path: Path) -> None:
        settings = LoggingSettings(
            file=str(tmp_path / "lightning.log"),
            max_file_size_mb=2,
            backup_count=5,
        )
        configure_logging(settings, service="test")

        rotating = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(rotating) == 1
        assert rotating[0].maxBytes == 2 * 1024 * 1024
        assert rotating[0].backupCount == 5

    def test_file_receives_records(self, tmp_path: Path) -> None:
        log_file = tmp_path / "lightning.log"
        configure_logging(
            LoggingSettings(file=str(log_file), format="json", level="INFO"),
            service="lightning-time",
        )

        logging.getLogger("lightning_time.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["service"] == "lightning-time"
