from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from domain.entities import ClientInfo, ProbeOutcome
from domain.enums import ProbeMethod


@dataclass(slots=True)
class ProbeStats:
    """Counts per outcome group."""
    total: int
    measured: int
    blocked: int
    offline: int

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[ProbeOutcome]) -> "ProbeStats":
        items = list(outcomes)
        return cls(
            total=len(items),
            measured=sum(1 for o in items if o.time is not None),
            blocked=sum(1 for o in items if o.method is ProbeMethod.BLOCKED),
            offline=sum(1 for o in items if o.method is ProbeMethod.NONE),
        )

    def to_dict(self) -> Dict[str, int]:
        return {"total": self.total, "measured": self.measured, "blocked": self.blocked, "offline": self.offline}


@dataclass(slots=True)
class ProbeReport:
    """One completed probe run, ranked and summarized."""
    outcomes: List[ProbeOutcome]
    stats: ProbeStats
    started_at: str
    duration_s: float
    client: Optional[ClientInfo] = None
    mode: str = "server"
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def best(self) -> Optional[ProbeOutcome]:
        """Fastest measured outcome, if any host produced a time."""
        if self.outcomes and self.outcomes[0].time is not None:
            return self.outcomes[0]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "user": self.client.to_dict() if self.client else None,
            "servers": [o.to_dict() for o in self.outcomes],
            "stats": self.stats.to_dict(),
            "timestamp": self.started_at,
            "checkDuration": self.duration_s,
        }
