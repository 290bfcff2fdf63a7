"""
Structured Logging

JSON log formatting for the ``language_detector`` logger hierarchy, for
hosts that ship logs to an aggregator.  The library never configures
logging on import; call ``configure_logging`` explicitly.
"""

import json
import logging
from datetime import datetime, timezone

from language_detector.config import Settings, get_settings

LOGGER_NAME = "language_detector"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, carrying the resolver's extra fields."""

    extra_fields = ("tags", "language", "cache_key")

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: getattr(record, name) for name in self.extra_fields if hasattr(record, name)})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Set level and handler of the package logger from settings."""
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    if settings.log_json:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.handlers = [handler]
        logger.propagate = False
    return logger
