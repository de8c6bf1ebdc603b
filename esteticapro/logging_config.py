"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: request_id, level, timestamp. Request and upstream fields are added
contextually (method, path, status_code, duration_ms for access lines;
upstream, error_reason for collaborator failures).

SECURITY: Never logs session tokens, API keys or client secrets.
"""

from __future__ import annotations

import json
import logging
import re
from contextvars import ContextVar
from datetime import datetime, timezone

# Request ID of the request currently being served (set by RequestIdMiddleware)
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(service.role.key|anon.key|api.?key|client.secret|secret|password|token|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)
_BEARER_PATTERN = re.compile(r"(bearer|basic)\s+[A-Za-z0-9._~+/=-]+", re.IGNORECASE)

_OPTIONAL_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "upstream",
)


class RequestIdFilter(logging.Filter):
    """Attach the current request ID to every record that lacks one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        return True


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: request_id, level, timestamp, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
            "request_id": getattr(record, "request_id", None),
        }

        for field in _OPTIONAL_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)

        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(
                str(getattr(record, "error_reason"))
            )

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        text = _BEARER_PATTERN.sub("[REDACTED]", text)
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with JSON formatting.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
