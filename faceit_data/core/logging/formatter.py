from __future__ import annotations

import json
import logging
import re
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

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+", re.IGNORECASE)

# extra={...} keys that become part of the payload
_EXTRA_KEYS = ("url", "endpoint", "status", "latency_ms", "error")


def redact(text: str) -> str:
    """Mask bearer tokens so API keys never reach a log sink."""
    return _BEARER.sub(r"\1***", text)


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    md: Dict[str, Any] = {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }
    for key in _EXTRA_KEYS:
        value = getattr(record, key, None)
        if value is not None:
            md[key] = value
    return md


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        parts = [
            md["timestamp"],
            md["level"],
            md["service"] or "-",
            f"{md['logger']}:{md['function']}:{md['line_number']}",
            record.getMessage(),
        ]
        fields = {k: md[k] for k in _EXTRA_KEYS if k in md}
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        ctx = get_context()
        if ctx:
            parts.append(f"{ctx}")
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = redact(" | ".join(parts))
        if not self.color:
            return line
        return f"{_LEVEL_COLORS.get(md['level'], '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return redact(json.dumps(payload, default=str, separators=(",", ":")))
