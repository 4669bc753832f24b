"""Shared stubs for probe engine tests."""
from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from domain.entities import HostSpec, ProbeAttempt
from domain.interfaces import IIcmpProber, IUdpProber
from application.services.probing import (
    HostProbeOrchestrator,
    KnownInfrastructureClassifier,
)


class _ScriptedProber:
    """Returns a fixed attempt per address; unknown addresses fail."""

    def __init__(self, script: Optional[Dict[str, object]] = None) -> None:
        self.script = dict(script or {})
        self.calls: List[str] = []

    async def probe(self, address: str) -> ProbeAttempt:
        self.calls.append(address)
        result = self.script.get(address)
        if isinstance(result, BaseException):
            raise result
        if result is None:
            return ProbeAttempt.failed()
        return ProbeAttempt.ok(int(result))


class StubIcmp(_ScriptedProber, IIcmpProber):
    pass


class StubUdp(_ScriptedProber, IUdpProber):
    pass


VALVE_PREFIXES = ("155.133.", "162.254.")


def make_host(name: str, address: str, region: str = "eu", country: str = "DE") -> HostSpec:
    return HostSpec(name=name, address=address, region=region, country=country)


@pytest.fixture
def classifier() -> KnownInfrastructureClassifier:
    return KnownInfrastructureClassifier(VALVE_PREFIXES)


@pytest.fixture
def build_orchestrator(classifier):
    def _build(icmp=None, udp=None):
        icmp = icmp or StubIcmp()
        udp = udp or StubUdp()
        return HostProbeOrchestrator(icmp=icmp, udp=udp, classifier=classifier), icmp, udp
    return _build
