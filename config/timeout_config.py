from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class ProbeTimeoutConfig:
    """Probe windows and ports with env overrides."""
    icmp_timeout_s: int = 2
    icmp_count: int = 2
    udp_timeout_ms: int = 2000
    udp_port: int = 27015

    @property
    def icmp_timeout_ms(self) -> int:
        return self.icmp_timeout_s * 1000

    @classmethod
    def from_env(cls) -> "ProbeTimeoutConfig":
        """Build ProbeTimeoutConfig from environment variables."""
        def _int(name: str, default: int) -> int:
            try:
                return int(os.getenv(name, str(default)))
            except Exception:
                return default

        return cls(
            icmp_timeout_s=max(1, _int("PING_TIMEOUT_S", 2)),
            icmp_count=max(1, _int("PING_COUNT", 2)),
            udp_timeout_ms=max(1, _int("UDP_TIMEOUT_MS", 2000)),
            udp_port=_int("STEAM_QUERY_PORT", 27015),
        )
