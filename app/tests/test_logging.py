"""
Tests for logging configuration.
"""

import json
import logging

from adder.logging_config import (
    JSONFormatter,
    get_logger,
    get_run_id,
    set_run_id,
    setup_logging,
)


def make_record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="adder.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_standard_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "adder.test"
        assert data["run_id"] is None
        assert "extra" not in data

    def test_run_id(self):
        set_run_id("abc123")
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["run_id"] == "abc123"

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record(error_type="EndOfInputError")))
        assert data["extra"] == {"error_type": "EndOfInputError"}


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def test_get_logger_prefix(self):
        assert get_logger("cli").name == "adder.cli"

    def test_run_id_roundtrip(self):
        set_run_id("r1")
        assert get_run_id() == "r1"

    def test_logs_to_stderr_only(self, capsys):
        setup_logging(level="DEBUG")
        get_logger("cli").debug("parsed")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "parsed" in captured.err

    def test_level_filters(self, capsys):
        setup_logging(level="WARNING")
        get_logger("cli").info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_idempotent(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("adder").handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "adder.log"
        setup_logging(level="INFO", log_file=str(log_file), json_format=True)
        get_logger("cli").info("to file")
        for handler in logging.getLogger("adder").handlers:
            handler.flush()
        line = log_file.read_text().strip()
        assert json.loads(line)["message"] == "to file"
