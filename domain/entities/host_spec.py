"""Host entity describing one game server endpoint."""
import ipaddress
from dataclasses import dataclass
from typing import Any, Mapping

from ..enums import Region


@dataclass(frozen=True)
class HostSpec:
    """Static description of a game server to probe."""

    name: str
    address: str
    region: Region
    country: str

    def __post_init__(self) -> None:
        try:
            ipaddress.IPv4Address(self.address)
        except ValueError:
            raise ValueError(f"{self.name!r}: not an IPv4 address: {self.address!r}") from None
        if not isinstance(self.region, Region):
            object.__setattr__(self, 'region', Region.parse(self.region))
        code = str(self.country).strip().upper()
        if len(code) != 2 or not code.isalpha():
            raise ValueError(f"{self.name!r}: country must be an ISO-3166 alpha-2 code, got {self.country!r}")
        object.__setattr__(self, 'country', code)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HostSpec":
        """Build from a roster entry; accepts either 'address' or 'host' for the IP."""
        address = data.get('address') or data.get('host')
        missing = [k for k, v in (('name', data.get('name')), ('address', address),
                                  ('region', data.get('region')), ('country', data.get('country'))) if not v]
        if missing:
            raise ValueError(f"roster entry missing {', '.join(missing)}")
        return cls(
            name=str(data['name']),
            address=str(address),
            region=Region.parse(data['region']),
            country=str(data['country']),
        )

    def to_dict(self) -> dict:
        """Convert host to dictionary."""
        return {
            'name': self.name,
            'host': self.address,
            'region': self.region.value,
            'country': self.country,
        }
