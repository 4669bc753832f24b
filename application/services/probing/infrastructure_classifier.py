from __future__ import annotations

import ipaddress
from typing import Iterable, Tuple


def _to_network(entry: str) -> ipaddress.IPv4Network:
    entry = entry.strip()
    if "/" in entry:
        return ipaddress.IPv4Network(entry, strict=False)
    if not entry.endswith("."):
        raise ValueError(f"prefix must end with '.' or be CIDR: {entry!r}")
    octets = entry[:-1].split(".")
    if not 1 <= len(octets) <= 3:
        raise ValueError(f"prefix must have 1-3 octets: {entry!r}")
    padded = octets + ["0"] * (4 - len(octets))
    return ipaddress.IPv4Network(f"{'.'.join(padded)}/{8 * len(octets)}")


class KnownInfrastructureClassifier:
    """Membership test against an operator's address space.

    Entries are dotted prefixes matched on whole octets (``"155.133."``) or
    CIDR blocks (``"185.25.180.0/22"``). The set is read-only after
    construction and safe to share between concurrent probes.
    """

    def __init__(self, prefixes: Iterable[str]) -> None:
        self._networks: Tuple[ipaddress.IPv4Network, ...] = tuple(_to_network(p) for p in prefixes)

    @property
    def networks(self) -> Tuple[ipaddress.IPv4Network, ...]:
        return self._networks

    def is_known(self, address: str) -> bool:
        try:
            ip = ipaddress.IPv4Address(address)
        except ValueError:
            return False
        return any(ip in net for net in self._networks)

    def __contains__(self, address: str) -> bool:
        return self.is_known(address)
