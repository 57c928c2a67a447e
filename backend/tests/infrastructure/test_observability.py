"""JSONFormatter and setup_logging."""

import json
import logging

from chirpolly.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "chirpolly.test", logging.INFO, __file__, 1, "Booking created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_contains_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "chirpolly.test"
    assert log["message"] == "Booking created"
    assert "timestamp" in log


def test_known_extra_fields_surface():
    log = json.loads(JSONFormatter().format(_record(booking_id="b-1", secret="x")))
    assert log["booking_id"] == "b-1"
    assert "secret" not in log


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "json")
    ours = [h for h in logging.root.handlers if h.get_name() == "chirpolly"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG
    logging.root.removeHandler(ours[0])
