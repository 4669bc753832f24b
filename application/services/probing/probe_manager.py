from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import HostSpec, ProbeOutcome
from .concurrency_limiter import ConcurrencyLimiter
from .errors import ProbeConfigurationError
from .host_probe_orchestrator import HostProbeOrchestrator
from .models import ProbeStats
from .result_ranker import ResultRanker


MetricsHook = Callable[[str, Dict[str, Any]], None]

DEFAULT_CONCURRENCY = 8


class ProbeManager:
    """Fans the orchestrator out over a host list and ranks the results."""

    def __init__(
        self,
        orchestrator: HostProbeOrchestrator,
        *,
        concurrency: int = DEFAULT_CONCURRENCY,
        ranker: Optional[ResultRanker] = None,
        logger: Optional[StructuredLogger] = None,
        metrics_hook: Optional[MetricsHook] = None,
    ) -> None:
        self.orchestrator = orchestrator
        self.concurrency = concurrency
        self.ranker = ranker or ResultRanker()
        self.logger = logger or get_logger(__name__, service="probe")
        self.metrics_hook = metrics_hook
        self.last_limiter: Optional[ConcurrencyLimiter] = None

    async def probe_all(self, hosts: Sequence[HostSpec], concurrency: Optional[int] = None) -> List[ProbeOutcome]:
        """Probe every host with at most ``concurrency`` in flight; return ranked outcomes."""
        limit = self.concurrency if concurrency is None else concurrency
        if not hosts:
            raise ProbeConfigurationError("host list is empty")
        limiter = ConcurrencyLimiter(limit)
        self.last_limiter = limiter

        self.logger.info(lambda: f"probe-run-start hosts={len(hosts)} concurrency={limit}")
        start = time.perf_counter()
        tasks = [self._task_for(h) for h in hosts]
        outcomes = await limiter.run(tasks)
        ranked = self.ranker.rank(outcomes)
        duration_s = round(time.perf_counter() - start, 1)

        stats = ProbeStats.from_outcomes(ranked)
        self.logger.success(
            lambda: f"probe-run-complete measured={stats.measured} blocked={stats.blocked} offline={stats.offline}",
            extra={"count": stats.total, "duration_s": duration_s},
        )
        self._metric("probe_run_complete", {**stats.to_dict(), "duration_s": duration_s, "concurrency": limit})
        return ranked

    def _task_for(self, host: HostSpec):
        async def _run() -> ProbeOutcome:
            return await self.orchestrator.probe(host)
        return _run

    def _metric(self, name: str, payload: Dict[str, Any]) -> None:
        if self.metrics_hook:
            try:
                self.metrics_hook(name, payload)
            except Exception as e:
                self.logger.warning(lambda: f"metrics-hook-failed {name}", extra={"error": str(e)})
