"""Structured Logging: JSON formatter output.

Tests:
    - Core fields always present
    - Known extra fields surfaced, unknown extras ignored
"""

import json
import logging

from gastromed.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "gastromed.test", logging.INFO, __file__, 1, "Created patient", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_core_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "gastromed.test"
    assert log["message"] == "Created patient"
    assert "timestamp" in log


def test_extra_fields_surfaced():
    log = json.loads(JSONFormatter().format(
        _record(entity="patient", entity_id="p-1", phone="555-0101"),
    ))
    assert log["entity"] == "patient"
    assert log["entity_id"] == "p-1"
    assert "phone" not in log
