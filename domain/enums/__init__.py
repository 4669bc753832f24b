"""Domain enumerations."""
from .region import Region
from .probe_method import ProbeMethod
from .probe_status import ProbeStatus, EXCELLENT_MAX_MS, GOOD_MAX_MS

__all__ = [
    'Region',
    'ProbeMethod',
    'ProbeStatus',
    'EXCELLENT_MAX_MS',
    'GOOD_MAX_MS',
]
