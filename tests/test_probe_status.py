import pytest

from domain.enums import ProbeMethod, ProbeStatus


@pytest.mark.parametrize(
    "time_ms, expected",
    [
        (1, ProbeStatus.EXCELLENT),
        (40, ProbeStatus.EXCELLENT),
        (41, ProbeStatus.GOOD),
        (80, ProbeStatus.GOOD),
        (81, ProbeStatus.POOR),
        (950, ProbeStatus.POOR),
    ],
)
def test_latency_thresholds(time_ms, expected):
    assert ProbeStatus.derive(ProbeMethod.ICMP, time_ms) is expected
    assert ProbeStatus.derive(ProbeMethod.UDP, time_ms) is expected


def test_null_time_uses_method():
    assert ProbeStatus.derive(ProbeMethod.BLOCKED, None) is ProbeStatus.BLOCKED
    assert ProbeStatus.derive(ProbeMethod.NONE, None) is ProbeStatus.OFFLINE


def test_measured_method_without_time_is_rejected():
    with pytest.raises(ValueError):
        ProbeStatus.derive(ProbeMethod.ICMP, None)
