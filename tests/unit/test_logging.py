# tests/unit/test_logging.py
"""
Unit tests for logging setup.

stdout belongs to the MCP protocol, so every handler must write to stderr.
"""

import json
import logging
import sys

import pytest

from k8s_mcp_server.utils.logging import (
    JsonFormatter,
    TextFormatter,
    parse_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the handlers setup_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (JsonFormatter, TextFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def make_record(msg="hello", **extra):
    record = logging.LogRecord("k8s_mcp_server.test", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestParseLevel:
    @pytest.mark.parametrize(
        "name, level",
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warn", logging.WARNING),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_known_levels(self, name, level):
        assert parse_level(name) == level

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="unknown log level"):
            parse_level("trace")


class TestFormatters:
    def test_json_line_includes_extras(self):
        line = JsonFormatter().format(make_record(namespace="prod", tail=10))
        payload = json.loads(line)

        assert payload["level"] == "INFO"
        assert payload["logger"] == "k8s_mcp_server.test"
        assert payload["msg"] == "hello"
        assert payload["namespace"] == "prod"
        assert payload["tail"] == 10

    def test_json_non_serializable_extra(self):
        line = JsonFormatter().format(make_record(error=ValueError("boom")))
        assert json.loads(line)["error"] == "boom"

    def test_text_appends_key_values(self):
        formatter = TextFormatter("%(levelname)s %(message)s")
        line = formatter.format(make_record(namespace="prod"))
        assert line == "INFO hello namespace=prod"

    def test_text_without_extras(self):
        formatter = TextFormatter("%(message)s")
        assert formatter.format(make_record()) == "hello"


class TestSetupLogging:
    def test_console_handler_uses_stderr(self):
        setup_logging("info", "text")
        root = logging.getLogger()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_json_format(self):
        setup_logging("debug", "json")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging("error")
        assert len(logging.getLogger().handlers) == 1

    def test_records_written_to_stderr_only(self, capsys):
        setup_logging("info", "json")

        logging.getLogger("k8s_mcp_server").info("written", extra={"namespace": "x"})

        captured = capsys.readouterr()
        assert captured.out == ""
        payload = json.loads(captured.err.strip().splitlines()[-1])
        assert payload["msg"] == "written"
        assert payload["namespace"] == "x"
