"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging

from utils import logging_utils


def test_setup_logging_writes_json(tmp_path, monkeypatch):
    log_file = tmp_path / "structured.log"
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)

    configured = logging_utils.setup_logging(log_file=log_file, console=False)
    assert configured == log_file

    logging.getLogger("tests.logging").info("Kat 1 fails SH", extra={"event": "test", "story": "Kat 1"})

    contents = log_file.read_text(encoding="utf-8").strip().splitlines()
    assert contents
    payload = json.loads(contents[-1])
    assert payload["message"] == "Kat 1 fails SH"
    assert payload["event"] == "test"
    assert payload["story"] == "Kat 1"
    assert payload["level"] == "INFO"


def test_setup_logging_only_configures_once(tmp_path, monkeypatch):
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    logging_utils.setup_logging(log_file=tmp_path / "first.log", console=False)

    second = tmp_path / "second.log"
    assert logging_utils.setup_logging(log_file=second, console=False) == second
    assert not second.exists()


def test_formatter_keeps_non_ascii_and_stringifies_objects():
    formatter = logging_utils.StructuredFormatter()
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "Sağlamıyor", None, None)
    record.payload = object()
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Sağlamıyor"
    assert payload["payload"].startswith("<object object")
