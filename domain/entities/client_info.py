"""Network identity of the machine running the probes."""
from dataclasses import dataclass


@dataclass
class ClientInfo:
    """Public IP, ISP and rough location, as reported by a geolocation service."""

    ip: str
    isp: str = "Unknown"
    country: str = "Unknown"
    city: str = "Unknown"
    country_code: str = ""
    region: str = ""
    lat: float = 0.0
    lon: float = 0.0

    def to_dict(self) -> dict:
        """Convert to the report's camelCase shape."""
        return {
            'ip': self.ip,
            'isp': self.isp,
            'country': self.country,
            'city': self.city,
            'countryCode': self.country_code,
            'region': self.region,
            'lat': self.lat,
            'lon': self.lon,
        }
