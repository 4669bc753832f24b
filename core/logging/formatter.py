from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# extra= keys promoted to top-level fields
_PROBE_FIELDS = ("host", "address", "method", "latency", "error", "count", "duration_s")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _probe_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: getattr(record, k) for k in _PROBE_FIELDS if getattr(record, k, None) is not None}


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            lvl = record.levelname
            color = _LEVEL_COLORS.get(lvl, "")
            parts = [
                md["timestamp"],
                f"{lvl:<8}",
                md["service"] or "-",
                record.getMessage(),
            ]
            fields = {**get_context(), **_probe_fields(record)}
            if fields:
                parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            return f"{color}{' | '.join(parts)}{_RESET}"
        except Exception:
            try:
                return record.getMessage()
            except Exception:
                return "<log format error>"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_metadata(record)
            payload["message"] = record.getMessage()
            payload.update(_probe_fields(record))
            ctx = get_context()
            if ctx:
                payload["context"] = ctx
            if record.exc_info:
                try:
                    payload["exception"] = self.formatException(record.exc_info)
                except Exception:
                    payload["exception"] = "unavailable"
            return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))
