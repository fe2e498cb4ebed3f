"""Structured Logging — JSON formatter, setup and stage timing.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (status_code, instruction_type, stage, ...) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - time_stage logs at DEBUG: per-stage timings are diagnostic, not audit
"""

import logging
import json
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

_EXTRA_KEYS = (
    "status_code", "instruction_type", "stage", "duration_ms",
    "error_code", "path", "http_status", "account_id", "response",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


@contextmanager
def time_stage(logger: logging.Logger, stage: str) -> Iterator[None]:
    """Log how long the wrapped pipeline stage took."""
    started = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug(
            f"Stage {stage} finished",
            extra={"stage": stage, "duration_ms": duration_ms},
        )
