"""
Structured logging with request ID support.

Features:
- JSON logs in production, pretty logs elsewhere.
- Context-bound request_id for correlation across a request.
- Matchmaker context fields (persona, stage, error_code) on every record that sets them.
- log_event helper for consistent structured logs with safe truncation.
- stage_timer for per-stage latency buckets.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Iterator, Optional, TextIO

LOGGER_NAME = "matchmaker"

# Record attributes promoted into formatted output when present.
CONTEXT_FIELDS = ("request_id", "persona", "stage", "error_code")

request_id_ctx_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Library use stays silent until main.py or cli.py calls configure_logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_request_id(default: Optional[str] = None) -> Optional[str]:
    """Fetch the current request_id from context (if any)."""
    rid = request_id_ctx_var.get()
    return rid if rid is not None else default


def latency_bucket_ms(latency_ms: Optional[float]) -> str:
    if latency_ms is None:
        return "unknown"
    for ceiling, label in ((10, "<10ms"), (100, "10-100ms"), (500, "100-500ms"), (1000, "500-1000ms")):
        if latency_ms < ceiling:
            return label
    return ">=1000ms"


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z")


def _context(record: logging.LogRecord) -> Dict[str, object]:
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class RequestIdFilter(logging.Filter):
    """Fill in request_id from context when the caller did not pass one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = get_request_id()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(_context(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class PrettyFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        context = _context(record)
        tags = ""
        if "request_id" in context:
            tags += f" [rid={context['request_id']}]"
        if "stage" in context:
            tags += f" [stage={context['stage']}]"
        if "persona" in context:
            tags += f" [persona={context['persona']}]"
        return f"{_timestamp(record)} {record.levelname} [{LOGGER_NAME}]{tags} {record.getMessage()}"


def configure_logging(env: str = "development", level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structured logging based on environment.

    Logs go to stdout unless another stream is given (the CLI keeps stdout
    for its JSON result).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter: logging.Formatter = JsonFormatter() if env.lower() == "production" else PrettyFormatter()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())

    logger.handlers = [handler]
    logger.propagate = True

    # Reduce noise from uvicorn loggers but keep error output
    logging.getLogger("uvicorn").propagate = False
    logging.getLogger("uvicorn.error").propagate = False


def _safe_truncate(value, limit: int = 500):
    try:
        text = str(value)
    except Exception:
        return "<unserializable>"
    if len(text) <= limit:
        return text
    return text[:limit] + "...<truncated>"


def log_event(
    level: str,
    msg: str,
    *,
    request_id: Optional[str],
    persona: Optional[str] = None,
    stage: Optional[str] = None,
    error_code: Optional[str] = None,
    extra: Optional[Dict[str, object]] = None,
):
    """Structured logging helper with safe truncation and request correlation."""

    logger = logging.getLogger(LOGGER_NAME)
    payload: Dict[str, object] = {
        "request_id": request_id or get_request_id(),
        "persona": persona,
        "stage": stage,
    }
    if error_code:
        payload["error_code"] = error_code
    if extra:
        for k, v in extra.items():
            payload[k] = v if isinstance(v, (int, float, bool)) else _safe_truncate(v)

    log_fn = getattr(logger, level, logger.info)
    log_fn(msg, extra=payload)


@contextmanager
def stage_timer(stage: str) -> Iterator[None]:
    """Log a pipeline stage's start and, on normal exit, its latency bucket at DEBUG."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("pipeline.stage.start", extra={"stage": stage})
    start = time.perf_counter()
    yield
    logger.debug(
        "pipeline.stage.done",
        extra={"stage": stage, "latency_bucket": latency_bucket_ms((time.perf_counter() - start) * 1000)},
    )
