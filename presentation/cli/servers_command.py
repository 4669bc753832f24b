from __future__ import annotations

import json
from typing import List, Optional

from config import settings
from config.servers import load_servers
from domain.entities import HostSpec


def roster_summary(hosts: List[HostSpec]) -> dict:
    """Roster plus distinct regions and countries in first-seen order."""
    return {
        "servers": [h.to_dict() for h in hosts],
        "total": len(hosts),
        "regions": list(dict.fromkeys(h.region.value for h in hosts)),
        "countries": list(dict.fromkeys(h.country for h in hosts)),
    }


class ServersCommand:
    """Lists the configured roster without probing."""

    def run(self, *, json_out: bool = False, servers_file: Optional[str] = None) -> int:
        hosts = load_servers(servers_file or settings.SERVERS_FILE)
        summary = roster_summary(hosts)
        if json_out:
            print(json.dumps(summary, ensure_ascii=False, separators=(",", ":")))
            return 0
        for h in hosts:
            print(f"- {h.name:<34} {h.address:<15} {h.region.friendly:<14} {h.country}")
        print(f"\n{summary['total']} servers in {len(summary['regions'])} regions, {len(summary['countries'])} countries")
        return 0
