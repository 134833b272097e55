"""Structured logging for the FACEIT client."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .formatter import ConsoleFormatter, JSONFormatter, redact
from .levels import LogLevel, register_levels, to_level
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "context",
    "get_context",
    "unbind",
    "ConsoleFormatter",
    "JSONFormatter",
    "redact",
    "LogLevel",
    "register_levels",
    "to_level",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
