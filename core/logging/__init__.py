"""Structured logging for the probe engine."""
from .config import bootstrap_logging, shutdown_logging
from .context import log_context, bind, get_context
from .logger import StructuredLogger, get_logger
from .levels import LogLevel

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "log_context",
    "bind",
    "get_context",
    "StructuredLogger",
    "get_logger",
    "LogLevel",
]
