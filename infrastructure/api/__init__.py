"""Infrastructure API module."""
from .geo_client import GeoLocationClient, is_local_address

__all__ = [
    'GeoLocationClient',
    'is_local_address',
]
