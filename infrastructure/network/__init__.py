"""Network probers."""
from .icmp_prober import IcmpPingProber, parse_ping_rtt, evaluate_icmp
from .udp_prober import A2SUdpProber, A2S_INFO_QUERY

__all__ = [
    'IcmpPingProber',
    'parse_ping_rtt',
    'evaluate_icmp',
    'A2SUdpProber',
    'A2S_INFO_QUERY',
]
