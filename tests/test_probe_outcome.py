import pytest

from domain.entities import ProbeAttempt, ProbeOutcome
from domain.enums import ProbeMethod, ProbeStatus

from conftest import make_host

HOST = make_host("EU West", "155.133.248.2")


def test_measured_outcome_carries_time_and_derived_status():
    o = ProbeOutcome.measured(HOST, ProbeMethod.ICMP, 35)
    assert (o.alive, o.reachable, o.time, o.status) == (True, True, 35, ProbeStatus.EXCELLENT)


def test_blocked_and_offline_shapes():
    b = ProbeOutcome.blocked(HOST)
    n = ProbeOutcome.offline(HOST)
    assert (b.alive, b.reachable, b.time, b.status) == (True, True, None, ProbeStatus.BLOCKED)
    assert (n.alive, n.reachable, n.time, n.status) == (False, False, None, ProbeStatus.OFFLINE)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(method=ProbeMethod.UDP, alive=True, reachable=True, time=None),
        dict(method=ProbeMethod.ICMP, alive=True, reachable=True, time=-1),
        dict(method=ProbeMethod.ICMP, alive=False, reachable=True, time=20),
        dict(method=ProbeMethod.BLOCKED, alive=True, reachable=True, time=10),
        dict(method=ProbeMethod.BLOCKED, alive=False, reachable=True, time=None),
        dict(method=ProbeMethod.NONE, alive=True, reachable=False, time=None),
        dict(method=ProbeMethod.NONE, alive=False, reachable=False, time=5),
    ],
)
def test_illegal_combinations_are_unrepresentable(kwargs):
    with pytest.raises(ValueError):
        ProbeOutcome(host=HOST, **kwargs)


def test_status_cannot_be_passed_in():
    with pytest.raises(TypeError):
        ProbeOutcome(host=HOST, method=ProbeMethod.NONE, alive=False, reachable=False, status=ProbeStatus.GOOD)


def test_outcome_is_immutable():
    o = ProbeOutcome.offline(HOST)
    with pytest.raises(Exception):
        o.time = 10


def test_to_dict_flattens_host_fields():
    d = ProbeOutcome.measured(HOST, ProbeMethod.UDP, 95).to_dict()
    assert d == {
        "name": "EU West",
        "host": "155.133.248.2",
        "region": "eu",
        "country": "DE",
        "alive": True,
        "reachable": True,
        "time": 95,
        "method": "udp",
        "status": "poor",
    }


def test_probe_attempt_rejects_inconsistent_values():
    with pytest.raises(ValueError):
        ProbeAttempt(success=True, time_ms=None)
    with pytest.raises(ValueError):
        ProbeAttempt(success=False, time_ms=12)
    assert ProbeAttempt.failed().time_ms is None
