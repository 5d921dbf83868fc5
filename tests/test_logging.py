"""Tests for JSON log formatting."""

import json
import logging

from app.core.logging import CustomJsonFormatter


def test_json_fields():
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(logger)s %(module)s %(function)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    record = logging.LogRecord(
        name="app.services.importer.pipeline",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="CSV import processed",
        args=(),
        exc_info=None,
        func="run_import",
    )
    record.total_rows = 5

    payload = json.loads(formatter.format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.services.importer.pipeline"
    assert payload["function"] == "run_import"
    assert payload["event"] == "CSV import processed"
    assert payload["total_rows"] == 5
    assert "message" not in payload
