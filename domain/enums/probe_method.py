"""How a host's liveness was established."""
from enum import Enum


class ProbeMethod(Enum):
    """Closed set of probe outcomes.

    ICMP and UDP carry a real latency measurement; BLOCKED and NONE never do.
    """

    ICMP = "icmp"
    UDP = "udp"
    BLOCKED = "blocked"
    NONE = "none"

    @property
    def is_measured(self) -> bool:
        return self in (ProbeMethod.ICMP, ProbeMethod.UDP)
