from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from config import settings, ProbeTimeoutConfig
from config.servers import known_prefixes, load_servers
from core.logging.logger import get_logger, StructuredLogger
from domain.entities import HostSpec, ProbeOutcome
from domain.enums import ProbeStatus, Region
from application.services.probing import (
    HostProbeOrchestrator,
    KnownInfrastructureClassifier,
    ProbeManager,
    ProbeReport,
)
from application.use_cases import ProbeServersUseCase
from infrastructure.api import GeoLocationClient
from infrastructure.network import A2SUdpProber, IcmpPingProber

_STATUS_COLORS = {
    ProbeStatus.EXCELLENT: "\033[92m",
    ProbeStatus.GOOD: "\033[93m",
    ProbeStatus.POOR: "\033[91m",
    ProbeStatus.BLOCKED: "\033[94m",
    ProbeStatus.OFFLINE: "\033[90m",
}
_RESET = "\033[0m"


@dataclass
class ProbeOptions:
    concurrency: Optional[int] = None
    regions: List[str] = field(default_factory=list)
    json_out: bool = False
    geo: bool = True
    servers_file: Optional[str] = None
    color: bool = True


def select_hosts(hosts: Sequence[HostSpec], regions: Sequence[str]) -> List[HostSpec]:
    """Keep hosts in the requested regions, preserving roster order."""
    if not regions:
        return list(hosts)
    wanted = {Region.parse(r) for r in regions}
    return [h for h in hosts if h.region in wanted]


def _format_outcome(idx: int, o: ProbeOutcome, color: bool) -> str:
    ping = f"{o.time}ms" if o.time is not None else "-"
    status = o.status.value
    if color:
        status = f"{_STATUS_COLORS[o.status]}{status}{_RESET}"
    return f"{idx:3d}  {o.host.name:<34} {o.host.region.value:<8} {o.host.country:<3} {ping:>7}  {o.method.value:<8} {status}"


def render_report(report: ProbeReport, *, color: bool = True) -> str:
    lines: List[str] = []
    if report.client is not None:
        c = report.client
        lines.append(f"Client: {c.ip}  ISP: {c.isp}  Location: {c.city}, {c.country}")
    lines.append(f"{'#':>3}  {'Server':<34} {'Region':<8} {'CC':<3} {'Ping':>7}  {'Method':<8} Status")
    for idx, o in enumerate(report.outcomes, start=1):
        lines.append(_format_outcome(idx, o, color))
    s = report.stats
    lines.append("")
    lines.append(f"Stats: {s.measured} measured, {s.blocked} blocked, {s.offline} offline (total {s.total})")
    best = report.best
    if best is not None:
        lines.append(f"Best: {best.host.name} ({best.time}ms via {best.method.value})")
    lines.append(f"Checked in {report.duration_s}s at {report.started_at}")
    return "\n".join(lines)


class ProbeCommand:
    """Runs a probe over the configured roster and prints the ranked report."""

    def __init__(self, metrics_hook: Optional[Callable[[str, Dict[str, Any]], None]] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")
        self.timeout = ProbeTimeoutConfig.from_env()
        self.metrics_hook = metrics_hook
        self._udp_probers: List[A2SUdpProber] = []

    def build_manager(self, concurrency: Optional[int] = None) -> ProbeManager:
        limit = concurrency or settings.CONCURRENCY_LIMIT
        udp = A2SUdpProber(self.timeout, workers=limit)
        self._udp_probers.append(udp)
        orchestrator = HostProbeOrchestrator(
            icmp=IcmpPingProber(self.timeout),
            udp=udp,
            classifier=KnownInfrastructureClassifier(known_prefixes(settings.KNOWN_PREFIXES)),
        )
        return ProbeManager(
            orchestrator,
            concurrency=limit,
            metrics_hook=self.metrics_hook,
        )

    async def execute(self, options: ProbeOptions, *, use_case: Optional[ProbeServersUseCase] = None) -> ProbeReport:
        hosts = select_hosts(load_servers(options.servers_file or settings.SERVERS_FILE), options.regions)
        if use_case is None:
            geo = GeoLocationClient() if options.geo else None
            use_case = ProbeServersUseCase(self.build_manager(options.concurrency), geo_client=geo)
        self.logger.info(lambda: f"probe-command hosts={len(hosts)}")
        try:
            return await use_case.execute(hosts, options.concurrency)
        finally:
            self.close()

    def close(self) -> None:
        while self._udp_probers:
            self._udp_probers.pop().close()

    async def run(self, options: ProbeOptions) -> int:
        report = await self.execute(options)
        if options.json_out:
            print(json.dumps(report.to_dict(), ensure_ascii=False, separators=(",", ":")))
        else:
            print(render_report(report, color=options.color))
        return 0

    async def _run_from_menu(self, options: ProbeOptions) -> None:
        try:
            await self.run(options)
        except (ValueError, OSError) as e:
            self.logger.warning(lambda: "menu-run-failed", extra={"error": str(e)})
            print(f"Run failed: {e}")

    async def run_interactive(self) -> int:
        options = ProbeOptions()
        while True:
            print("\n=== Probe Servers ===")
            print("1) Probe all servers")
            print("2) Probe selected regions")
            print(f"3) Toggle JSON output (currently: {'ON' if options.json_out else 'OFF'})")
            print(f"4) Set concurrency (currently: {options.concurrency or settings.CONCURRENCY_LIMIT})")
            print("5) Back")
            choice = input("Choose an option: ").strip()
            if choice == "1":
                options.regions = []
                await self._run_from_menu(options)
            elif choice == "2":
                print("Regions: " + ", ".join(f"{r.value} ({r.friendly})" for r in Region.all_regions()))
                raw = input("Enter regions separated by commas: ").strip()
                try:
                    options.regions = [r for r in (p.strip() for p in raw.split(",")) if r]
                    select_hosts([], options.regions)
                except ValueError as e:
                    print(str(e))
                    continue
                await self._run_from_menu(options)
            elif choice == "3":
                options.json_out = not options.json_out
                print(f"JSON output {'ENABLED' if options.json_out else 'DISABLED'}")
            elif choice == "4":
                v = input("Enter concurrency (>=1): ").strip()
                try:
                    options.concurrency = max(1, int(v))
                    print(f"Concurrency set to {options.concurrency}")
                except ValueError:
                    print("Invalid number.")
            elif choice == "5":
                return 0
            else:
                print("Invalid option.")
