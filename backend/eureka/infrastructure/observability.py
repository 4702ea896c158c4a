"""Structured Logging — one JSON object per log line, domain ids as top-level keys.

Invariants:
    - Every line has timestamp, level, logger and message
    - Only allow-listed extra keys are emitted; arbitrary record attributes
      (and anything a caller passes by mistake) stay out of the output
    - setup_logging is idempotent: calling it twice does not duplicate lines

Design Decisions:
    - stdlib logging + a small Formatter, no logging library
    - Handlers tag log calls with extra={"question_id": ...} instead of
      formatting ids into the message, so logs can be filtered per entity
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "user_id", "theme_id", "question_id", "answer_id", "comment_id",
    "error_code", "path",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"

_HANDLER_NAME = "eureka"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the single root handler (json or text) at the given level."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # SQLAlchemy logs every statement at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
