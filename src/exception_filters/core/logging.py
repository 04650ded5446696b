"""Logging configuration for services that render filtered errors.

Records emitted by :class:`~exception_filters.chain.FilterChain` carry the
translated ``code``, ``status_code``, ``filter`` and ``exception_type``; the JSON
formatter groups those under a single ``error`` object.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import get_request_id

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(request_id)s | %(message)s"

_STANDARD_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}
ERROR_RECORD_FIELDS = ("code", "status_code", "filter", "exception_type")


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def __init__(self, *, defaults: dict[str, Any] | None = None, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self._defaults = defaults or {}

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = dict(self._defaults)
        payload.update(
            {
                "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "request_id": getattr(record, "request_id", get_request_id()),
            }
        )

        error = {
            field: self._coerce_extra(record.__dict__[field])
            for field in ERROR_RECORD_FIELDS
            if field in record.__dict__
        }
        if error:
            payload["error"] = error
        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_ATTRS or key in error:
                continue
            payload.setdefault(key, self._coerce_extra(value))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    @staticmethod
    def _coerce_extra(value: Any) -> Any:
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return str(value)
        return value


class RequestContextFilter(logging.Filter):
    """Attach request correlation identifiers to emitted log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        return True


def _formatter_config(settings: Settings) -> dict[str, Any]:
    if settings.log_format == "plain":
        return {"format": _PLAIN_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"}
    return {
        "()": JsonLogFormatter,
        "defaults": {
            "service": settings.project_name,
            "environment": settings.environment,
        },
    }


def configure_logging(settings: Settings) -> None:
    """Apply the logging configuration described by ``settings``."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.captureWarnings(True)

    handler_names = ["default"]
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": _formatter_config(settings)},
        "filters": {
            "request_context": {"()": RequestContextFilter},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
                "level": level,
                "filters": ["request_context"],
            }
        },
        "loggers": {
            "": {"handlers": handler_names, "level": level},
            "uvicorn": {"handlers": handler_names, "level": level, "propagate": False},
            "uvicorn.error": {"handlers": handler_names, "level": level, "propagate": False},
            "uvicorn.access": {"handlers": handler_names, "level": level, "propagate": False},
        },
    }
    logging.config.dictConfig(config)


__all__ = ["ERROR_RECORD_FIELDS", "JsonLogFormatter", "RequestContextFilter", "configure_logging"]
