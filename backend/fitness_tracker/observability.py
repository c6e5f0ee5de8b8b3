"""
Logging setup for the Fitness Tracker API.

``LOG_FORMAT=text`` gives one human-readable line per record; ``json`` gives
one JSON object per line. Entity ids and recipients passed through
``extra=`` by the services appear as top-level keys of the JSON record.
"""

import json
import logging
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a log record as a single-line JSON object."""

    CONTEXT_FIELDS = ("user_id", "training_id", "statistics_id", "recipient", "error_code", "path")

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in self.CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Route all records to stderr in the requested format.

    Existing root handlers are replaced, so calling this again (for example
    on a reload) does not duplicate output.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
