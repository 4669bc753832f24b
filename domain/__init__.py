"""Domain layer - Entities, enums, and interfaces."""
from .entities import HostSpec, ProbeAttempt, ProbeOutcome, ClientInfo
from .enums import Region, ProbeMethod, ProbeStatus
from .interfaces import IIcmpProber, IUdpProber

__all__ = [
    # Entities
    'HostSpec',
    'ProbeAttempt',
    'ProbeOutcome',
    'ClientInfo',
    # Enums
    'Region',
    'ProbeMethod',
    'ProbeStatus',
    # Interfaces
    'IIcmpProber',
    'IUdpProber',
]
