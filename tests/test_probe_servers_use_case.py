import asyncio

import pytest

from application.services.probing import ProbeConfigurationError, ProbeManager
from application.use_cases import ProbeServersUseCase
from domain.entities import ClientInfo
from domain.enums import ProbeMethod

from conftest import StubIcmp, StubUdp, make_host


class _StubGeo:
    def __init__(self, info=None, delay=0.0):
        self.info = info or ClientInfo(ip="81.2.69.160", isp="Example ISP", country="United Kingdom", city="London")
        self.delay = delay
        self.requested = []

    async def lookup(self, ip=None):
        self.requested.append(ip)
        await asyncio.sleep(self.delay)
        return self.info


HOSTS = [
    make_host("Frankfurt", "155.133.244.2"),
    make_host("Virginia", "162.254.192.2", region="us", country="US"),
    make_host("Lab", "203.0.113.1", region="us", country="US"),
]


def _manager(build_orchestrator):
    orch, _, _ = build_orchestrator(
        icmp=StubIcmp({"162.254.192.2": 95}),
        udp=StubUdp({"155.133.244.2": 31}),
    )
    return ProbeManager(orch, concurrency=2)


@pytest.mark.asyncio
async def test_report_ranks_and_attaches_client(build_orchestrator):
    geo = _StubGeo(delay=0.01)
    report = await ProbeServersUseCase(_manager(build_orchestrator), geo_client=geo).execute(HOSTS, client_ip="81.2.69.160")

    assert [o.host.name for o in report.outcomes] == ["Frankfurt", "Virginia", "Lab"]
    assert report.best.method is ProbeMethod.UDP
    assert report.best.time == 31
    assert (report.stats.measured, report.stats.blocked, report.stats.offline) == (2, 0, 1)
    assert report.client.isp == "Example ISP"
    assert geo.requested == ["81.2.69.160"]

    d = report.to_dict()
    assert d["user"]["ip"] == "81.2.69.160"
    assert [s["method"] for s in d["servers"]] == ["udp", "icmp", "none"]


@pytest.mark.asyncio
async def test_report_without_geo_client(build_orchestrator):
    report = await ProbeServersUseCase(_manager(build_orchestrator)).execute(HOSTS)
    assert report.client is None
    assert report.to_dict()["user"] is None


@pytest.mark.asyncio
async def test_geo_lookup_settles_before_configuration_error(build_orchestrator):
    geo = _StubGeo(delay=0.01)
    use_case = ProbeServersUseCase(_manager(build_orchestrator), geo_client=geo)
    with pytest.raises(ProbeConfigurationError):
        await use_case.execute([])
    assert geo.requested == [None]
