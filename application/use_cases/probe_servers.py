"""Use case: one full probe run over a server roster."""
from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Optional, Sequence

from domain.entities import HostSpec
from domain.entities import ClientInfo
from application.services.probing import ProbeManager, ProbeReport, ProbeStats
from infrastructure.api import GeoLocationClient

logger = logging.getLogger(__name__)


class ProbeServersUseCase:
    """
    Probes a roster and packages the ranked outcomes as a ProbeReport.

    Geolocation of the probing machine runs alongside the probes and only
    decorates the report; its failure never affects the outcomes.
    """

    def __init__(
        self,
        manager: ProbeManager,
        geo_client: Optional[GeoLocationClient] = None,
    ):
        self.manager = manager
        self.geo_client = geo_client

    async def execute(
        self,
        hosts: Sequence[HostSpec],
        concurrency: Optional[int] = None,
        client_ip: Optional[str] = None,
    ) -> ProbeReport:
        started_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        start = time.perf_counter()

        geo_task: Optional[asyncio.Task] = None
        if self.geo_client is not None:
            geo_task = asyncio.ensure_future(self.geo_client.lookup(client_ip))

        try:
            outcomes = await self.manager.probe_all(hosts, concurrency)
        finally:
            client: Optional[ClientInfo] = await geo_task if geo_task else None

        duration_s = round(time.perf_counter() - start, 1)
        report = ProbeReport(
            outcomes=outcomes,
            stats=ProbeStats.from_outcomes(outcomes),
            started_at=started_at,
            duration_s=duration_s,
            client=client,
        )
        best = report.best
        if best is not None:
            logger.info(f"best {best.host.name} ({best.time}ms via {best.method.value})")
        return report
