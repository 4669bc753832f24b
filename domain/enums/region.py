"""Region enumeration for CS2 server locations."""
from enum import Enum


class Region(Enum):
    """Coarse geographic grouping of game servers.

    Provides:
    - friendly: human-readable label for CLI output
    - all_regions(): every region in roster order
    """

    EU = "eu"            # Europe
    CIS = "cis"          # Russia & CIS
    ASIA = "asia"        # Asia, incl. Central Asia
    US = "us"            # North America
    SA = "sa"            # South America
    OCEANIA = "oceania"  # Australia
    ME = "me"            # Middle East
    AFRICA = "africa"    # Africa

    @property
    def friendly(self) -> str:
        """Get a human-friendly label for console output."""
        mapping = {
            "eu": "Europe",
            "cis": "Russia & CIS",
            "asia": "Asia",
            "us": "North America",
            "sa": "South America",
            "oceania": "Oceania",
            "me": "Middle East",
            "africa": "Africa",
        }
        return mapping[self.value]

    @classmethod
    def parse(cls, value: "str | Region") -> "Region":
        """Resolve a region tag case-insensitively."""
        if isinstance(value, Region):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown region tag: {value!r}") from None

    @classmethod
    def all_regions(cls) -> list['Region']:
        """Get all available regions."""
        return list(cls)
