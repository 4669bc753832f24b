from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from core.logging.context import log_context
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import HostSpec, ProbeAttempt, ProbeOutcome
from domain.enums import ProbeMethod
from domain.interfaces import IIcmpProber, IUdpProber
from .infrastructure_classifier import KnownInfrastructureClassifier


class ProbeStage(Enum):
    START = "start"
    TRY_ICMP = "try_icmp"
    TRY_UDP = "try_udp"
    CLASSIFY = "classify"
    DONE = "done"


class HostProbeOrchestrator:
    """Runs the ICMP -> UDP -> classify fallback chain for one host.

    Each stage runs at most once. Failures, including unexpected prober
    exceptions, move the machine to the next stage; ``probe`` always ends in
    DONE and returns a ProbeOutcome.
    """

    def __init__(
        self,
        icmp: IIcmpProber,
        udp: IUdpProber,
        classifier: KnownInfrastructureClassifier,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.icmp = icmp
        self.udp = udp
        self.classifier = classifier
        self.logger = logger or get_logger(__name__, service="probe")

    async def probe(self, host: HostSpec) -> ProbeOutcome:
        """Probe one host and return its immutable outcome."""
        stage = ProbeStage.START
        outcome: Optional[ProbeOutcome] = None
        with log_context(host=host.name, address=host.address):
            while stage is not ProbeStage.DONE:
                if stage is ProbeStage.START:
                    stage = ProbeStage.TRY_ICMP
                elif stage is ProbeStage.TRY_ICMP:
                    attempt = await self._attempt(self.icmp, ProbeMethod.ICMP, host)
                    if attempt.success:
                        outcome = ProbeOutcome.measured(host, ProbeMethod.ICMP, attempt.time_ms)
                        stage = ProbeStage.DONE
                    else:
                        stage = ProbeStage.TRY_UDP
                elif stage is ProbeStage.TRY_UDP:
                    attempt = await self._attempt(self.udp, ProbeMethod.UDP, host)
                    if attempt.success:
                        outcome = ProbeOutcome.measured(host, ProbeMethod.UDP, attempt.time_ms)
                        stage = ProbeStage.DONE
                    else:
                        stage = ProbeStage.CLASSIFY
                elif stage is ProbeStage.CLASSIFY:
                    outcome = self._classify(host)
                    stage = ProbeStage.DONE
        if outcome is None:
            raise RuntimeError(f"probe of {host.address} reached DONE without an outcome")
        return outcome

    async def _attempt(
        self,
        prober: Union[IIcmpProber, IUdpProber],
        method: ProbeMethod,
        host: HostSpec,
    ) -> ProbeAttempt:
        try:
            attempt = await prober.probe(host.address)
        except Exception as e:
            self.logger.error(
                lambda: f"{method.value}-prober-exception",
                extra={"method": method.value, "error": f"{type(e).__name__}: {e}"},
            )
            return ProbeAttempt.failed()
        if attempt.success:
            self.logger.debug(lambda: f"{method.value}-ok", extra={"method": method.value, "latency": attempt.time_ms})
        else:
            self.logger.debug(lambda: f"{method.value}-failed", extra={"method": method.value})
        return attempt

    def _classify(self, host: HostSpec) -> ProbeOutcome:
        if self.classifier.is_known(host.address):
            self.logger.info(lambda: "host-blocked", extra={"method": ProbeMethod.BLOCKED.value})
            return ProbeOutcome.blocked(host)
        self.logger.info(lambda: "host-offline", extra={"method": ProbeMethod.NONE.value})
        return ProbeOutcome.offline(host)
