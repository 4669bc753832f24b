"""ICMP echo prober backed by the system ``ping`` utility."""
from __future__ import annotations

import asyncio
import contextlib
import re
import shutil
import statistics
import sys
from typing import List, Optional

from config.timeout_config import ProbeTimeoutConfig
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import ProbeAttempt
from domain.interfaces import IIcmpProber

DEFAULT_PING_BIN = shutil.which("ping")

# "rtt min/avg/max/mdev = 10.1/12.3/14.0/1.2 ms" (Linux), "round-trip min/avg/max/stddev = ..." (BSD/macOS)
_SUMMARY_RE = re.compile(r"min/avg/max(?:/[a-z]+)?\s*=\s*([\d.]+)/([\d.]+)/([\d.]+)")
# "Minimum = 10ms, Maximum = 14ms, Average = 12ms" (Windows)
_WINDOWS_AVG_RE = re.compile(r"Average\s*=\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)
# per-reply "time=12.3 ms" / "time<1ms"
_REPLY_TIME_RE = re.compile(r"time[=<]\s*([\d.]+)\s*ms", re.IGNORECASE)


def parse_ping_rtt(output: str) -> Optional[float]:
    """Extract the average round-trip time in ms from ping output, if any."""
    m = _SUMMARY_RE.search(output)
    if m:
        return float(m.group(2))
    m = _WINDOWS_AVG_RE.search(output)
    if m:
        return float(m.group(1))
    times: List[float] = [float(t) for t in _REPLY_TIME_RE.findall(output)]
    if times:
        return statistics.fmean(times)
    return None


def evaluate_icmp(alive: bool, rtt_ms: Optional[float], timeout_ms: int) -> ProbeAttempt:
    """Accept a measurement only when it is strictly inside (0, timeout_ms).

    The raw value is rounded half-up first, so sub-millisecond replies read
    as 0 and count as noise.
    """
    if not alive or rtt_ms is None:
        return ProbeAttempt.failed()
    time_ms = int(rtt_ms + 0.5)
    if 0 < time_ms < timeout_ms:
        return ProbeAttempt.ok(time_ms)
    return ProbeAttempt.failed()


class IcmpPingProber(IIcmpProber):
    """Sends ``icmp_count`` echo requests through the OS ping utility."""

    def __init__(
        self,
        timeout: ProbeTimeoutConfig,
        logger: Optional[StructuredLogger] = None,
        *,
        ping_bin: Optional[str] = DEFAULT_PING_BIN,
        platform: str = sys.platform,
    ) -> None:
        self.timeout = timeout
        self.logger = logger or get_logger(__name__, service="icmp")
        self.ping_bin = ping_bin
        self.is_windows = platform.startswith("win")
        # BSD ping (macOS included) reads -W in milliseconds
        self.wait_in_ms = platform == "darwin" or "bsd" in platform

    @property
    def deadline_s(self) -> float:
        # one reply window per packet plus startup slack
        return float(self.timeout.icmp_count * self.timeout.icmp_timeout_s + 1)

    def build_command(self, address: str) -> List[str]:
        count = str(self.timeout.icmp_count)
        if self.is_windows:
            return [self.ping_bin or "ping", "-n", count, "-w", str(self.timeout.icmp_timeout_ms), address]
        wait = self.timeout.icmp_timeout_ms if self.wait_in_ms else self.timeout.icmp_timeout_s
        return [self.ping_bin or "ping", "-c", count, "-W", str(wait), address]

    async def probe(self, address: str) -> ProbeAttempt:
        if not self.ping_bin:
            self.logger.warning(lambda: "icmp-unavailable", extra={"error": "ping binary not found"})
            return ProbeAttempt.failed()
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.build_command(address),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            self.logger.warning(lambda: "icmp-spawn-failed", extra={"error": str(e)})
            return ProbeAttempt.failed()

        try:
            out, _ = await asyncio.wait_for(proc.communicate(), timeout=self.deadline_s)
        except asyncio.TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            self.logger.debug(lambda: "icmp-deadline-exceeded")
            return ProbeAttempt.failed()

        text = (out or b"").decode("utf-8", errors="replace")
        rtt = parse_ping_rtt(text)
        attempt = evaluate_icmp(proc.returncode == 0, rtt, self.timeout.icmp_timeout_ms)
        if not attempt.success and rtt is not None:
            self.logger.debug(lambda: f"icmp-rejected rtt={rtt}", extra={"error": "rtt outside measurement window"})
        return attempt
