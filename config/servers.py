"""Default CS2 server roster and Valve address space."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from domain.entities import HostSpec

# Valve-operated prefixes; a silent address in here is treated as blocked, not offline
VALVE_IP_PREFIXES: tuple[str, ...] = (
    '155.133.', '162.254.', '185.25.180.', '185.25.181.', '185.25.182.', '185.25.183.',
    '103.10.124.', '103.28.54.', '45.121.184.', '45.121.185.', '205.185.194.',
    '205.185.195.', '205.185.196.', '205.185.197.',
)

DEFAULT_SERVERS: tuple[dict[str, str], ...] = (
    # ── Europe ─────────────────────────────────────────────────────────────
    {'name': 'CS2 EU West (Luxembourg)',        'host': '155.133.248.2', 'region': 'eu', 'country': 'LU'},
    {'name': 'CS2 EU West 2 (Luxembourg)',      'host': '155.133.249.2', 'region': 'eu', 'country': 'LU'},
    {'name': 'CS2 EU East (Vienna)',            'host': '155.133.254.2', 'region': 'eu', 'country': 'AT'},
    {'name': 'CS2 EU East 2 (Vienna)',          'host': '155.133.255.2', 'region': 'eu', 'country': 'AT'},
    {'name': 'CS2 EU North (Stockholm)',        'host': '155.133.246.2', 'region': 'eu', 'country': 'SE'},
    {'name': 'CS2 EU North 2 (Stockholm)',      'host': '155.133.247.2', 'region': 'eu', 'country': 'SE'},
    {'name': 'CS2 Poland (Warsaw)',             'host': '155.133.252.2', 'region': 'eu', 'country': 'PL'},
    {'name': 'CS2 Poland 2 (Warsaw)',           'host': '155.133.253.2', 'region': 'eu', 'country': 'PL'},
    {'name': 'CS2 Spain (Madrid)',              'host': '155.133.232.2', 'region': 'eu', 'country': 'ES'},
    {'name': 'CS2 Germany (Frankfurt)',         'host': '155.133.244.2', 'region': 'eu', 'country': 'DE'},
    {'name': 'CS2 Finland (Helsinki)',          'host': '155.133.242.2', 'region': 'eu', 'country': 'FI'},
    # ── Russia & CIS ───────────────────────────────────────────────────────
    {'name': 'CS2 Russia (Moscow)',             'host': '185.25.180.2',  'region': 'cis', 'country': 'RU'},
    {'name': 'CS2 Russia 2 (Moscow)',           'host': '185.25.181.2',  'region': 'cis', 'country': 'RU'},
    {'name': 'CS2 Russia (St. Petersburg)',     'host': '185.25.182.2',  'region': 'cis', 'country': 'RU'},
    {'name': 'CS2 Russia (Ekaterinburg)',       'host': '185.25.183.2',  'region': 'cis', 'country': 'RU'},
    # ── Central Asia ───────────────────────────────────────────────────────
    {'name': 'CS2 Kazakhstan (Almaty)',         'host': '155.133.241.2', 'region': 'asia', 'country': 'KZ'},
    {'name': 'CS2 Central Asia (Tashkent)',     'host': '155.133.240.5', 'region': 'asia', 'country': 'UZ'},
    {'name': 'CS2 Siberia (Novosibirsk)',       'host': '185.25.183.5',  'region': 'cis', 'country': 'RU'},
    # ── USA ────────────────────────────────────────────────────────────────
    {'name': 'CS2 US East (Virginia)',          'host': '162.254.192.2', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US East 2 (Virginia)',        'host': '162.254.192.3', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US West (Seattle)',           'host': '162.254.193.2', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US West 2 (LA)',              'host': '162.254.194.2', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US West 3 (LA)',              'host': '162.254.195.2', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US Central (Chicago)',        'host': '162.254.196.2', 'region': 'us', 'country': 'US'},
    {'name': 'CS2 US Central 2 (Dallas)',       'host': '162.254.197.2', 'region': 'us', 'country': 'US'},
    # ── Asia ───────────────────────────────────────────────────────────────
    {'name': 'CS2 Singapore',                   'host': '103.10.124.2',  'region': 'asia', 'country': 'SG'},
    {'name': 'CS2 Singapore 2',                 'host': '103.28.54.2',   'region': 'asia', 'country': 'SG'},
    {'name': 'CS2 Japan (Tokyo)',               'host': '45.121.185.2',  'region': 'asia', 'country': 'JP'},
    {'name': 'CS2 Japan 2 (Tokyo)',             'host': '45.121.185.3',  'region': 'asia', 'country': 'JP'},
    {'name': 'CS2 Hong Kong',                   'host': '155.133.238.2', 'region': 'asia', 'country': 'HK'},
    {'name': 'CS2 Hong Kong 2',                 'host': '155.133.239.2', 'region': 'asia', 'country': 'HK'},
    {'name': 'CS2 India (Mumbai)',              'host': '155.133.236.2', 'region': 'asia', 'country': 'IN'},
    {'name': 'CS2 India 2 (Chennai)',           'host': '155.133.237.2', 'region': 'asia', 'country': 'IN'},
    {'name': 'CS2 South Korea (Seoul)',         'host': '155.133.234.2', 'region': 'asia', 'country': 'KR'},
    {'name': 'CS2 China (Shanghai)',            'host': '155.133.235.2', 'region': 'asia', 'country': 'CN'},
    {'name': 'CS2 Taiwan (Taipei)',             'host': '155.133.233.2', 'region': 'asia', 'country': 'TW'},
    # ── South America ──────────────────────────────────────────────────────
    {'name': 'CS2 Brazil (São Paulo)',          'host': '205.185.194.2', 'region': 'sa', 'country': 'BR'},
    {'name': 'CS2 Brazil 2 (São Paulo)',        'host': '205.185.194.3', 'region': 'sa', 'country': 'BR'},
    {'name': 'CS2 Chile (Santiago)',            'host': '205.185.195.2', 'region': 'sa', 'country': 'CL'},
    {'name': 'CS2 Peru (Lima)',                 'host': '205.185.196.2', 'region': 'sa', 'country': 'PE'},
    {'name': 'CS2 Argentina (Buenos Aires)',    'host': '205.185.197.2', 'region': 'sa', 'country': 'AR'},
    # ── Oceania ────────────────────────────────────────────────────────────
    {'name': 'CS2 Australia (Sydney)',          'host': '45.121.184.2',  'region': 'oceania', 'country': 'AU'},
    {'name': 'CS2 Australia 2 (Sydney)',        'host': '45.121.184.3',  'region': 'oceania', 'country': 'AU'},
    # ── Middle East ────────────────────────────────────────────────────────
    {'name': 'CS2 UAE (Dubai)',                 'host': '155.133.240.2', 'region': 'me', 'country': 'AE'},
    {'name': 'CS2 UAE 2 (Dubai)',               'host': '155.133.240.3', 'region': 'me', 'country': 'AE'},
    # ── Africa ─────────────────────────────────────────────────────────────
    {'name': 'CS2 South Africa (Johannesburg)', 'host': '155.133.230.2', 'region': 'africa', 'country': 'ZA'},
)


def parse_servers(entries: Iterable[Mapping[str, Any]]) -> List[HostSpec]:
    """Turn raw roster entries into HostSpecs, naming the bad index on failure."""
    hosts: List[HostSpec] = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"roster entry {idx} is not an object")
        try:
            hosts.append(HostSpec.from_dict(entry))
        except ValueError as e:
            raise ValueError(f"roster entry {idx}: {e}") from e
    return hosts


def load_servers(path: Optional[Union[str, Path]] = None) -> List[HostSpec]:
    """Load the roster from a JSON file, or the built-in CS2 roster when no path is given."""
    if path is None:
        return parse_servers(DEFAULT_SERVERS)
    payload = json.loads(Path(path).read_text(encoding='utf-8'))
    if isinstance(payload, Mapping):
        payload = payload.get('servers')
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a list of servers")
    return parse_servers(payload)


def known_prefixes(override: Sequence[str] = ()) -> tuple[str, ...]:
    """Known-infrastructure entries, preferring an explicit override."""
    return tuple(override) if override else VALVE_IP_PREFIXES
