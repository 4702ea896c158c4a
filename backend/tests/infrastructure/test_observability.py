"""Structured Logging — JSONFormatter surfaces domain ids as top-level keys."""

import json
import logging

from eureka.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "eureka.test", logging.INFO, __file__, 1, "Answer upvoted", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "eureka.test"
    assert log["message"] == "Answer upvoted"
    assert "timestamp" in log


def test_extra_ids_surfaced():
    log = json.loads(JSONFormatter().format(
        _record(answer_id="a-1", user_id="u-1"),
    ))
    assert log["answer_id"] == "a-1"
    assert log["user_id"] == "u-1"
    assert "question_id" not in log


def test_unknown_extras_not_dumped():
    log = json.loads(JSONFormatter().format(_record(password="hunter2")))
    assert "password" not in log


def test_setup_logging_is_idempotent():
    from eureka.infrastructure.observability import setup_logging

    root = logging.getLogger()
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in root.handlers if h.get_name() == "eureka"]
    assert len(ours) == 1
    assert root.level == logging.WARNING
    assert not isinstance(ours[0].formatter, JSONFormatter)
    root.removeHandler(ours[0])
