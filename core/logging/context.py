"""Per-task log fields for concurrent host probes.

Each asyncio task copies the current context when it is created, so the
``host``/``address`` pair bound by one orchestrator run is only visible to
records emitted from that run.
"""
from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping

_fields: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar("probe_log_fields", default={})


def _merged(values: Mapping[str, Any]) -> Dict[str, Any]:
    # None means "not known here" and never overwrites an outer value
    merged = dict(_fields.get())
    merged.update((k, v) for k, v in values.items() if v is not None)
    return merged


def get_context() -> Dict[str, Any]:
    """Snapshot of the fields bound for the running task."""
    return dict(_fields.get())


def bind(**values: Any) -> None:
    """Bind fields until the current task ends."""
    _fields.set(_merged(values))


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind fields for the body of a ``with`` block, restoring the outer set on exit."""
    token = _fields.set(_merged(values))
    try:
        yield get_context()
    finally:
        _fields.reset(token)
