"""Outcome entity: what one probe run established about one host."""
from dataclasses import dataclass, field
from typing import Optional

from ..enums import ProbeMethod, ProbeStatus
from .host_spec import HostSpec


@dataclass(frozen=True)
class ProbeOutcome:
    """Immutable per-host result of a probe run.

    The constructor rejects impossible combinations:
    - time is set exactly when method is icmp or udp
    - blocked hosts are alive and reachable, with no time
    - none hosts are neither alive nor reachable, with no time
    status is always derived from (method, time) and cannot be passed in.
    """

    host: HostSpec
    method: ProbeMethod
    alive: bool
    reachable: bool
    time: Optional[int] = None
    status: ProbeStatus = field(init=False)

    def __post_init__(self) -> None:
        if self.method.is_measured:
            if self.time is None or self.time < 0:
                raise ValueError(f"{self.method.value} outcome needs a non-negative time")
            if not (self.alive and self.reachable):
                raise ValueError(f"{self.method.value} outcome must be alive and reachable")
        else:
            if self.time is not None:
                raise ValueError(f"{self.method.value} outcome cannot carry a time")
            expected = self.method is ProbeMethod.BLOCKED
            if self.alive is not expected or self.reachable is not expected:
                raise ValueError(
                    f"{self.method.value} outcome requires alive={expected} and reachable={expected}"
                )
        object.__setattr__(self, 'status', ProbeStatus.derive(self.method, self.time))

    @classmethod
    def measured(cls, host: HostSpec, method: ProbeMethod, time_ms: int) -> "ProbeOutcome":
        return cls(host=host, method=method, alive=True, reachable=True, time=time_ms)

    @classmethod
    def blocked(cls, host: HostSpec) -> "ProbeOutcome":
        return cls(host=host, method=ProbeMethod.BLOCKED, alive=True, reachable=True)

    @classmethod
    def offline(cls, host: HostSpec) -> "ProbeOutcome":
        return cls(host=host, method=ProbeMethod.NONE, alive=False, reachable=False)

    @property
    def has_time(self) -> bool:
        return self.time is not None

    def to_dict(self) -> dict:
        """Convert outcome to a flat dictionary (host fields first)."""
        return {
            **self.host.to_dict(),
            'alive': self.alive,
            'reachable': self.reachable,
            'time': self.time,
            'method': self.method.value,
            'status': self.status.value,
        }
