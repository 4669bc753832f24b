from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "probe",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "probe.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
    console: Optional[bool] = None,
) -> None:
    """Configure the root logger once per process.

    Console output goes to stderr so it never mixes with a JSON report on
    stdout. File output is JSON lines, written from a queue listener thread.
    """
    global _listener
    try:
        register_levels()
        shutdown_logging()
        root = logging.getLogger()
        root.handlers.clear()
        lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
        root.setLevel(lvl)

        if console is None:
            console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
        if console:
            console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
            handler = logging.StreamHandler()
            handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
            handler.setFormatter(ConsoleFormatter())
            root.addHandler(handler)

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            root.addHandler(QueueHandler(q))
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()

        if not root.handlers:
            root.addHandler(logging.NullHandler())
        logging.getLogger(service).debug("logging ready")
    except Exception:
        try:
            logging.basicConfig(level=logging.INFO)
        except Exception:
            pass


def shutdown_logging() -> None:
    global _listener
    try:
        if _listener:
            _listener.stop()
            _listener = None
    except Exception:
        pass
