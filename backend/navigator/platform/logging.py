import logging
import sys
import json
from datetime import datetime, timezone
from ..platform.config import settings
from ..platform.log_context import get_assessment_id


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        assessment_id = getattr(record, "assessment_id", None) or get_assessment_id()
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if assessment_id:
            payload["assessment_id"] = assessment_id
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(level: str | None = None):
    """Configure structured logging for the application."""
    log_level = logging.getLevelName((level or settings.LOG_LEVEL or "INFO").upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    root_logger.handlers.clear()

    # Console handler with structured format
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    formatter = JsonFormatter()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Silence noisy loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
