"""Latency quality label derived from a probe outcome."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .probe_method import ProbeMethod

# Upper bounds (inclusive) in milliseconds
EXCELLENT_MAX_MS = 40
GOOD_MAX_MS = 80


class ProbeStatus(Enum):
    """Presentation label for a finished probe."""

    EXCELLENT = "excellent"
    GOOD = "good"
    POOR = "poor"
    BLOCKED = "blocked"
    OFFLINE = "offline"

    @classmethod
    def derive(cls, method: ProbeMethod, time_ms: Optional[int]) -> "ProbeStatus":
        """Pure mapping of (method, time) to a status label."""
        if time_ms is None:
            if method is ProbeMethod.BLOCKED:
                return cls.BLOCKED
            if method is ProbeMethod.NONE:
                return cls.OFFLINE
            raise ValueError(f"method {method.value} requires a measured time")
        if time_ms <= EXCELLENT_MAX_MS:
            return cls.EXCELLENT
        if time_ms <= GOOD_MAX_MS:
            return cls.GOOD
        return cls.POOR
