"""
Unified logging
Structured (JSON line) log output for every MindScope component
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .exceptions import MindScopeException

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message', 'asctime',
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        if record.exc_info:
            exc_type, exc_value = record.exc_info[0], record.exc_info[1]
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
            }
            if isinstance(exc_value, MindScopeException):
                log_entry["exception"]["error_code"] = exc_value.error_code
                log_entry["exception"]["details"] = exc_value.details

        return json.dumps(log_entry, ensure_ascii=False, default=str,
                          separators=(',', ':'))


class MindScopeLogger:
    """Logger registry for the `mindscope` namespace"""

    _loggers: Dict[str, logging.Logger] = {}
    _configured = False

    @classmethod
    def configure(cls, log_level: str = "INFO"):
        """Attach the structured console handler once; later calls only change the level"""
        root_logger = logging.getLogger("mindscope")
        root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

        if cls._configured:
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(console_handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls.configure()

        if name not in cls._loggers:
            logger_name = name if name.startswith("mindscope.") else f"mindscope.{name}"
            cls._loggers[name] = logging.getLogger(logger_name)

        return cls._loggers[name]


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the `mindscope` namespace"""
    return MindScopeLogger.get_logger(name)


def log_error(logger: logging.Logger, error: Exception,
              context: Optional[Dict[str, Any]] = None):
    """Log an exception with traceback and optional context"""
    extra_info: Dict[str, Any] = {"event_type": "error"}
    if context:
        extra_info.update(context)

    logger.error(f"Error occurred: {error}", exc_info=error, extra=extra_info)


def log_business_event(logger: logging.Logger, event: str, **kwargs):
    """Log a domain event (never include message text here)"""
    extra_info: Dict[str, Any] = {
        "event_type": "business_event",
        "business_event": event,
    }
    extra_info.update(kwargs)

    logger.info(f"Business event: {event}", extra=extra_info)
