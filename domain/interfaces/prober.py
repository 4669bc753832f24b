"""Prober interfaces consumed by the host probe orchestrator."""
from abc import ABC, abstractmethod
from ..entities import ProbeAttempt


class IIcmpProber(ABC):
    """Interface for an ICMP echo prober."""

    @abstractmethod
    async def probe(self, address: str) -> ProbeAttempt:
        """Echo-probe one IPv4 address. Must not raise on network failure."""
        pass


class IUdpProber(ABC):
    """Interface for a UDP query prober."""

    @abstractmethod
    async def probe(self, address: str) -> ProbeAttempt:
        """Send one query datagram and wait for any reply. Must not raise on network failure."""
        pass
