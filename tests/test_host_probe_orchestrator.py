import pytest

from config.timeout_config import ProbeTimeoutConfig
from domain.enums import ProbeMethod, ProbeStatus
from infrastructure.network import IcmpPingProber

from conftest import StubIcmp, StubUdp, make_host

VALVE = make_host("EU West", "155.133.248.2")
UNKNOWN = make_host("Community", "203.0.113.7")


@pytest.mark.asyncio
async def test_icmp_success_short_circuits(build_orchestrator):
    orch, icmp, udp = build_orchestrator(StubIcmp({VALVE.address: 35}))
    o = await orch.probe(VALVE)
    assert (o.method, o.time, o.status) == (ProbeMethod.ICMP, 35, ProbeStatus.EXCELLENT)
    assert (o.alive, o.reachable) == (True, True)
    assert udp.calls == []


@pytest.mark.asyncio
async def test_udp_fallback_after_icmp_failure(build_orchestrator):
    orch, icmp, udp = build_orchestrator(StubIcmp(), StubUdp({VALVE.address: 95}))
    o = await orch.probe(VALVE)
    assert (o.method, o.time, o.status) == (ProbeMethod.UDP, 95, ProbeStatus.POOR)
    assert icmp.calls == [VALVE.address]
    assert udp.calls == [VALVE.address]


@pytest.mark.asyncio
async def test_known_infrastructure_is_blocked_not_offline(build_orchestrator):
    orch, _, _ = build_orchestrator()
    o = await orch.probe(VALVE)
    assert (o.method, o.time, o.status) == (ProbeMethod.BLOCKED, None, ProbeStatus.BLOCKED)
    assert (o.alive, o.reachable) == (True, True)


@pytest.mark.asyncio
async def test_unknown_silent_host_is_offline(build_orchestrator):
    orch, _, _ = build_orchestrator()
    o = await orch.probe(UNKNOWN)
    assert (o.method, o.time, o.status) == (ProbeMethod.NONE, None, ProbeStatus.OFFLINE)
    assert (o.alive, o.reachable) == (False, False)


@pytest.mark.asyncio
async def test_prober_exceptions_are_absorbed_as_stage_failures(build_orchestrator):
    icmp = StubIcmp({UNKNOWN.address: OSError("network down")})
    udp = StubUdp({UNKNOWN.address: RuntimeError("unexpected")})
    orch, _, _ = build_orchestrator(icmp, udp)
    o = await orch.probe(UNKNOWN)
    assert o.method is ProbeMethod.NONE
    # each stage runs exactly once, no retry
    assert icmp.calls == [UNKNOWN.address]
    assert udp.calls == [UNKNOWN.address]


class _FakeProc:
    def __init__(self, output: bytes, returncode: int = 0):
        self._output = output
        self.returncode = returncode

    async def communicate(self):
        return self._output, None

    def kill(self):
        pass

    async def wait(self):
        return self.returncode


@pytest.mark.asyncio
@pytest.mark.parametrize("avg", ["0.000", "0.400", "2000.000", "2450.120"])
async def test_noise_icmp_times_force_udp_fallback(monkeypatch, classifier, avg):
    output = (
        "2 packets transmitted, 2 received, 0% packet loss, time 1001ms\n"
        f"rtt min/avg/max/mdev = {avg}/{avg}/{avg}/0.000 ms\n"
    ).encode()

    async def fake_exec(*cmd, **kwargs):
        return _FakeProc(output)

    monkeypatch.setattr("asyncio.create_subprocess_exec", fake_exec)
    icmp = IcmpPingProber(ProbeTimeoutConfig(), ping_bin="/bin/ping", platform="linux")
    udp = StubUdp({VALVE.address: 60})

    from application.services.probing import HostProbeOrchestrator
    o = await HostProbeOrchestrator(icmp, udp, classifier).probe(VALVE)

    assert o.method is ProbeMethod.UDP
    assert (o.time, o.status) == (60, ProbeStatus.GOOD)
    assert udp.calls == [VALVE.address]


@pytest.mark.asyncio
async def test_missing_outcome_raises_even_without_asserts(build_orchestrator, monkeypatch):
    orch, _, _ = build_orchestrator()
    monkeypatch.setattr(orch, "_classify", lambda host: None)
    with pytest.raises(RuntimeError, match="without an outcome"):
        await orch.probe(make_host("Lab", "203.0.113.1"))
