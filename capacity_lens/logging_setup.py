"""JSON logging for the API and demo processes."""

import json
import logging
from typing import Any

# Decision context passed via `extra=` by the decision engine
CONTEXT_FIELDS = ("route", "flight_id", "strategy")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with decision context when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {field: getattr(record, field) for field in CONTEXT_FIELDS if getattr(record, field, None) is not None}
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(level: str | int = logging.INFO) -> None:
    """Set the root level and route stream output through JsonFormatter."""
    root = logging.getLogger()
    root.setLevel(level)

    handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    if not handlers:
        handler = logging.StreamHandler()
        root.addHandler(handler)
        handlers = [handler]

    for handler in handlers:
        handler.setFormatter(JsonFormatter())
