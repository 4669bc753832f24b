import json

import pytest

from config import Settings, ProbeTimeoutConfig
from config.servers import DEFAULT_SERVERS, VALVE_IP_PREFIXES, known_prefixes, load_servers
from domain.entities import HostSpec
from domain.enums import Region


def test_default_roster_loads_in_order():
    hosts = load_servers()
    assert len(hosts) == len(DEFAULT_SERVERS) == 46
    assert hosts[0].name == "CS2 EU West (Luxembourg)"
    assert hosts[0].region is Region.EU
    assert hosts[-1].country == "ZA"
    assert len({h.address for h in hosts}) == 46


def test_roster_file_accepts_list_or_servers_object(tmp_path):
    entries = [
        {"name": "Lab", "address": "198.51.100.4", "region": "EU", "country": "de"},
        {"name": "Edge", "host": "203.0.113.5", "region": "us", "country": "US"},
    ]
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(entries), encoding="utf-8")
    as_obj = tmp_path / "obj.json"
    as_obj.write_text(json.dumps({"servers": entries}), encoding="utf-8")

    for path in (as_list, as_obj):
        hosts = load_servers(path)
        assert [h.address for h in hosts] == ["198.51.100.4", "203.0.113.5"]
        assert hosts[0].country == "DE"
        assert hosts[0].region is Region.EU


@pytest.mark.parametrize(
    "entry, fragment",
    [
        ({"name": "x", "host": "1.2.3", "region": "eu", "country": "DE"}, "IPv4"),
        ({"name": "x", "host": "1.2.3.4", "region": "mars", "country": "DE"}, "region"),
        ({"name": "x", "host": "1.2.3.4", "region": "eu", "country": "DEU"}, "ISO-3166"),
        ({"host": "1.2.3.4", "region": "eu", "country": "DE"}, "name"),
    ],
)
def test_bad_roster_entry_names_its_index(tmp_path, entry, fragment):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"name": "ok", "host": "1.1.1.1", "region": "eu", "country": "DE"}, entry]))
    with pytest.raises(ValueError) as exc:
        load_servers(path)
    assert "entry 1" in str(exc.value)
    assert fragment in str(exc.value)


def test_roster_file_must_hold_a_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"hosts": []}))
    with pytest.raises(ValueError):
        load_servers(path)


def test_host_spec_round_trip_shape():
    h = HostSpec.from_dict({"name": "A", "host": "155.133.248.2", "region": "eu", "country": "lu"})
    assert h.to_dict() == {"name": "A", "host": "155.133.248.2", "region": "eu", "country": "LU"}


def test_known_prefixes_override():
    assert known_prefixes() == VALVE_IP_PREFIXES
    assert known_prefixes(("10.",)) == ("10.",)


def test_timeout_config_from_env(monkeypatch):
    monkeypatch.setenv("PING_TIMEOUT_S", "3")
    monkeypatch.setenv("UDP_TIMEOUT_MS", "not-a-number")
    monkeypatch.setenv("STEAM_QUERY_PORT", "27016")
    cfg = ProbeTimeoutConfig.from_env()
    assert (cfg.icmp_timeout_s, cfg.icmp_timeout_ms, cfg.udp_timeout_ms, cfg.udp_port) == (3, 3000, 2000, 27016)


@pytest.mark.parametrize(
    "attr, value",
    [("CONCURRENCY_LIMIT", 0), ("UDP_TIMEOUT_MS", 0), ("PING_TIMEOUT_S", -1), ("STEAM_QUERY_PORT", 70000)],
)
def test_settings_validate_rejects_bad_values(monkeypatch, attr, value):
    monkeypatch.setattr(Settings, attr, value)
    with pytest.raises(ValueError):
        Settings.validate()
