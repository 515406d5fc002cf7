from __future__ import annotations

import io
import json
import logging
import sys

from listzipper.utils.logging import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("listzipper.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.transforms = ["peaks"]
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "listzipper.test"
    assert payload["message"] == "hello world"
    assert payload["context"] == {"transforms": ["peaks"]}


def test_json_formatter_omits_empty_context() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", (), None)
    payload = json.loads(JsonFormatter().format(record))
    assert "context" not in payload
    assert set(payload) == {"level", "logger", "message", "time"}


def test_json_formatter_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("werkzeug").level == logging.CRITICAL
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_setup_logging_writes_to_given_stream() -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        setup_logging("INFO", stream=stream)
        logging.getLogger("listzipper.cli").info("chart written", extra={"path": "out.html"})
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "chart written"
    assert payload["context"] == {"path": "out.html"}
