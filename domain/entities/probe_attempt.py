"""Result of a single ICMP or UDP probe stage."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProbeAttempt:
    """Success flag plus latency; time is present only on success."""

    success: bool
    time_ms: Optional[int] = None

    def __post_init__(self) -> None:
        if self.success and (self.time_ms is None or self.time_ms < 0):
            raise ValueError("successful attempt needs a non-negative time")
        if not self.success and self.time_ms is not None:
            raise ValueError("failed attempt cannot carry a time")

    @classmethod
    def ok(cls, time_ms: int) -> "ProbeAttempt":
        return cls(success=True, time_ms=time_ms)

    @classmethod
    def failed(cls) -> "ProbeAttempt":
        return cls(success=False, time_ms=None)
