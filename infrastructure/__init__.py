"""Infrastructure layer - network probers and API clients."""
from .api import GeoLocationClient
from .network import IcmpPingProber, A2SUdpProber

__all__ = [
    'GeoLocationClient',
    'IcmpPingProber',
    'A2SUdpProber',
]
