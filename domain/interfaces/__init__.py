"""Domain interfaces."""
from .prober import IIcmpProber, IUdpProber

__all__ = [
    'IIcmpProber',
    'IUdpProber',
]
